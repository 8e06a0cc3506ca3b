"""Profile resolution and environment bootstrap.

- profile_name: raw-argv pre-pass selecting the profile
- guard: profile validation and default activation
- directories: profile directory tree and state files
- post_upgrade: update-marker consumption
- sequence: the ordered per-invocation bootstrap
"""
from __future__ import annotations

from .directories import EMPTY_CONFIG, DirectoryBootstrapper
from .guard import ActiveProfileGuard, GuardState, creates_profile
from .post_upgrade import PostUpgradeRunner, UpdateMarker
from .profile_name import ProfileNameResolver, is_profile_command, profile_name_from_args
from .sequence import BootstrapContext, BootstrapSequence, Collaborators

__all__ = [
    "ActiveProfileGuard",
    "BootstrapContext",
    "BootstrapSequence",
    "Collaborators",
    "DirectoryBootstrapper",
    "EMPTY_CONFIG",
    "GuardState",
    "PostUpgradeRunner",
    "ProfileNameResolver",
    "UpdateMarker",
    "creates_profile",
    "is_profile_command",
    "profile_name_from_args",
]
