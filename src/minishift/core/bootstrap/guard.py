"""Validate the requested profile and keep an active profile recorded."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, Sequence

from minishift.core.config import AllInstancesConfig
from minishift.core.constants import DEFAULT_PROFILE_NAME, START_CMD
from minishift.core.errors import BootstrapError, InvalidProfileNameError, ProfileNotFoundError
from minishift.core.paths import PathResolver
from minishift.core.profile import (
    get_active_profile,
    is_valid_profile_name,
    profile_exists,
    set_default_profile_active,
)

from .profile_name import is_profile_command

logger = logging.getLogger(__name__)


class GuardState(str, Enum):
    UNVALIDATED = "unvalidated"
    VALID = "valid"
    REJECTED_INVALID_NAME = "rejected-invalid-name"
    REJECTED_NONEXISTENT = "rejected-nonexistent"
    ACTIVE_SET = "active-set"


def creates_profile(command_path: Sequence[str]) -> bool:
    """Whether the command may bring a new profile into existence.

    ``command_path`` lists command names from the root, e.g.
    ``("profile", "set")``. The root command itself is exempt too.
    """
    path = tuple(command_path)
    if not path:
        return True
    if len(path) >= 2 and is_profile_command(path[-2]):
        return True
    return path[-1] == START_CMD


class ActiveProfileGuard:
    """Gatekeeper run on every bootstrapped invocation.

    States: UNVALIDATED -> validate() -> VALID | REJECTED_* ;
    VALID -> ensure_default_active() -> ACTIVE_SET.
    """

    def __init__(
        self,
        resolver: PathResolver,
        *,
        set_cluster_context: Optional[Callable[[str], object]] = None,
    ) -> None:
        self.resolver = resolver
        self._set_cluster_context = set_cluster_context
        self.state = GuardState.UNVALIDATED

    def validate(self, requested: str, command_path: Sequence[str] = ()) -> None:
        """Reject unusable profiles before anything is written to disk.

        Raises:
            InvalidProfileNameError: If a non-default name is not alphanumeric.
            ProfileNotFoundError: If the profile does not exist and the command
                cannot create it.
        """
        if requested != DEFAULT_PROFILE_NAME:
            if not is_valid_profile_name(requested):
                self.state = GuardState.REJECTED_INVALID_NAME
                raise InvalidProfileNameError(requested)
            if not creates_profile(command_path) and not profile_exists(self.resolver, requested):
                self.state = GuardState.REJECTED_NONEXISTENT
                raise ProfileNotFoundError(requested)
        self.state = GuardState.VALID

    def ensure_default_active(self, all_instances: Optional[AllInstancesConfig], requested: str) -> bool:
        """Mark the default profile active when no profile is.

        The external cluster context only follows when the default profile
        is also the one requested; otherwise the default just becomes the
        recorded active profile.

        Returns:
            True when the default profile was activated.

        Raises:
            BootstrapError: If the all-instances config was never loaded.
            ConfigError: If the change cannot be persisted.
        """
        if self.state is not GuardState.VALID and self.state is not GuardState.ACTIVE_SET:
            raise BootstrapError(f"Profile '{requested}' has not been validated")
        if all_instances is None:
            raise BootstrapError("All instance config is not initialized")

        activated = False
        if not get_active_profile(all_instances):
            set_default_profile_active(all_instances)
            logger.info("No active profile; '%s' is now active", DEFAULT_PROFILE_NAME)
            activated = True
            if requested == DEFAULT_PROFILE_NAME and self._set_cluster_context is not None:
                self._set_cluster_context(DEFAULT_PROFILE_NAME)

        self.state = GuardState.ACTIVE_SET
        return activated


__all__ = ["ActiveProfileGuard", "GuardState", "creates_profile"]
