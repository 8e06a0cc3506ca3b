"""Profile queries and active-profile mutations."""
from __future__ import annotations

import re
from typing import List

from minishift.core.config import AllInstancesConfig
from minishift.core.constants import DEFAULT_PROFILE_NAME
from minishift.core.errors import InvalidProfileNameError
from minishift.core.paths import PathResolver

PROFILE_NAME_PATTERN = re.compile(r"[A-Za-z0-9]+")


def is_valid_profile_name(name: str) -> bool:
    return bool(PROFILE_NAME_PATTERN.fullmatch(name or ""))


def profile_exists(resolver: PathResolver, name: str) -> bool:
    """Whether ``name`` already has a home directory. The default always exists."""
    if name == DEFAULT_PROFILE_NAME:
        return True
    return resolver.profile_home(name).is_dir()


def list_profiles(resolver: PathResolver) -> List[str]:
    """Return the default profile followed by every other profile on disk."""
    names = [DEFAULT_PROFILE_NAME]
    profiles_dir = resolver.profiles_dir
    if profiles_dir.is_dir():
        for entry in sorted(profiles_dir.iterdir()):
            if entry.is_dir() and is_valid_profile_name(entry.name) and entry.name not in names:
                names.append(entry.name)
    return names


def get_active_profile(all_instances: AllInstancesConfig) -> str:
    return all_instances.active_profile


def set_active_profile(all_instances: AllInstancesConfig, name: str) -> None:
    """Mark ``name`` active and persist the change.

    Raises:
        InvalidProfileNameError: If ``name`` is not alphanumeric.
        ConfigError: If the document cannot be written.
    """
    if name != DEFAULT_PROFILE_NAME and not is_valid_profile_name(name):
        raise InvalidProfileNameError(name)
    all_instances.active_profile = name
    all_instances.write()


def set_default_profile_active(all_instances: AllInstancesConfig) -> None:
    set_active_profile(all_instances, DEFAULT_PROFILE_NAME)


__all__ = [
    "PROFILE_NAME_PATTERN",
    "is_valid_profile_name",
    "profile_exists",
    "list_profiles",
    "get_active_profile",
    "set_active_profile",
    "set_default_profile_active",
]
