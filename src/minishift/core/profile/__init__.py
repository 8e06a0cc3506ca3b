"""Profile management helpers."""
from __future__ import annotations

from .actions import (
    PROFILE_NAME_PATTERN,
    get_active_profile,
    is_valid_profile_name,
    list_profiles,
    profile_exists,
    set_active_profile,
    set_default_profile_active,
)

__all__ = [
    "PROFILE_NAME_PATTERN",
    "get_active_profile",
    "is_valid_profile_name",
    "list_profiles",
    "profile_exists",
    "set_active_profile",
    "set_default_profile_active",
]
