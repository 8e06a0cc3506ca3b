"""Stable error types for minishift.

Every condition that must abort the invocation is raised as a
:class:`MinishiftError`. Only the CLI entry point turns one into the
single-line diagnostic and exit code 1.
"""
from __future__ import annotations

from .constants import INVALID_PROFILE_NAME


class MinishiftError(Exception):
    """Base class for fatal minishift errors."""

    pass


class BootstrapError(MinishiftError):
    """Raised when the profile environment cannot be prepared."""

    pass


class ConfigError(MinishiftError):
    """Raised when a persisted config document cannot be loaded or written."""

    pass


class BooleanFormatError(MinishiftError, ValueError):
    """Raised when a value cannot be parsed as a boolean."""

    pass


class PostUpgradeError(MinishiftError):
    """Raised when post-upgrade maintenance cannot complete."""

    pass


class ProfileError(MinishiftError):
    """Raised when a requested profile cannot be used."""

    def __init__(self, message: str, profile: str) -> None:
        super().__init__(message)
        self.profile = profile


class InvalidProfileNameError(ProfileError):
    def __init__(self, profile: str) -> None:
        super().__init__(INVALID_PROFILE_NAME, profile)


class ProfileNotFoundError(ProfileError):
    def __init__(self, profile: str) -> None:
        super().__init__(
            f"Profile '{profile}' doesn't exist, Use 'minishift profile set {profile}' "
            f"or 'minishift start --profile {profile}' to create",
            profile,
        )


__all__ = [
    "MinishiftError",
    "BootstrapError",
    "ConfigError",
    "BooleanFormatError",
    "PostUpgradeError",
    "ProfileError",
    "InvalidProfileNameError",
    "ProfileNotFoundError",
]
