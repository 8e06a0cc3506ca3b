"""Decide which profile governs an invocation.

This is a textual pre-pass over the raw argument vector that runs before
argparse builds the namespace: the profile must be known before its
config file can feed flag and config values, so the parsed namespace
cannot be used here.

Precedence (first match wins):
1. ``profile|profiles|instance set <name>``; beats ``--profile``
2. ``--profile <name>``, only when no profile command token is present
   anywhere on the command line (whatever its position)
3. The active profile recorded in the all-instances config, if that file exists
4. ``""``; callers fall back to the default profile
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from minishift.core.config import AllInstancesConfig
from minishift.core.constants import (
    PROFILE_CMD,
    PROFILE_CMD_ALIASES,
    PROFILE_FLAG,
    PROFILE_SET_CMD,
)
from minishift.core.errors import BootstrapError, ConfigError

logger = logging.getLogger(__name__)

_PROFILE_OPTION = f"--{PROFILE_FLAG}"


def is_profile_command(token: str) -> bool:
    return token == PROFILE_CMD or token in PROFILE_CMD_ALIASES


def profile_name_from_args(args: Sequence[str]) -> str:
    """Return the profile named on the command line, or ``""``.

    A trailing ``--profile`` or a profile command without ``set <name>``
    after it yields no override.
    """
    argv: List[str] = list(args)
    profile_cmd_used = any(is_profile_command(a) for a in argv)

    for i, arg in enumerate(argv):
        if not profile_cmd_used:
            if arg == _PROFILE_OPTION:
                return argv[i + 1] if i + 1 < len(argv) else ""
            if arg.startswith(_PROFILE_OPTION + "="):
                return arg.split("=", 1)[1]
        if is_profile_command(arg):
            if len(argv) <= i + 2:
                break
            if argv[i + 1] == PROFILE_SET_CMD:
                return argv[i + 2]
            break
    return ""


class ProfileNameResolver:
    """Resolve the profile name and keep the all-instances config it loaded.

    The loaded :class:`AllInstancesConfig` is reused by the rest of the
    bootstrap so the document is read once per process.
    """

    def __init__(self, all_instances_path: Path) -> None:
        self.all_instances_path = Path(all_instances_path)
        self.all_instances: Optional[AllInstancesConfig] = None

    def resolve(self, args: Sequence[str]) -> str:
        """Return the governing profile name (``""`` when nothing selects one).

        Raises:
            BootstrapError: If the all-instances config exists but is malformed.
        """
        name = profile_name_from_args(args)

        active = ""
        if self.all_instances_path.exists():
            try:
                self.all_instances = AllInstancesConfig.load(self.all_instances_path)
            except ConfigError as exc:
                raise BootstrapError(f"Error initializing all instance config: {exc}") from exc
            active = self.all_instances.active_profile

        if name:
            logger.debug("Profile '%s' selected on the command line", name)
            return name
        if active:
            return active
        return ""


__all__ = ["ProfileNameResolver", "is_profile_command", "profile_name_from_args"]
