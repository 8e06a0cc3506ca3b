"""Fixed names and file locations shared by the bootstrap sequence."""
from __future__ import annotations

BINARY_NAME = "minishift"
DEFAULT_PROFILE_NAME = "minishift"

# Environment
ENV_PREFIX = "MINISHIFT"
HOME_ENV_VAR = "MINISHIFT_HOME"
ENABLE_EXPERIMENTAL_ENV = "MINISHIFT_ENABLE_EXPERIMENTAL"
DEFAULT_HOME_DIRNAME = ".minishift"

# On-disk layout
PROFILES_DIRNAME = "profiles"
CONFIG_DIRNAME = "config"
CONFIG_FILENAME = "config.json"
ALL_INSTANCES_CONFIG_FILENAME = "allinstances.json"
UPDATE_MARKER_FILENAME = "updatemarker"
LOGS_DIRNAME = "logs"
LOG_FILENAME = "minishift.log"

# Command line
PROFILE_CMD = "profile"
PROFILE_CMD_ALIASES = ("profiles", "instance")
PROFILE_SET_CMD = "set"
PROFILE_FLAG = "profile"
START_CMD = "start"
SHOW_LIBMACHINE_LOGS = "show-libmachine-logs"

# Direct children of the root command that never touch the profile home.
NO_BOOTSTRAP_COMMANDS = ("version", "completion")

# Flags owned by the logging setup; kept in sync with the merged config.
SYNCED_FLAGS = ("v", "alsologtostderr", "log_dir")

INVALID_PROFILE_NAME = "Profile names must consist of alphanumeric characters only."

__all__ = [
    "BINARY_NAME",
    "DEFAULT_PROFILE_NAME",
    "ENV_PREFIX",
    "HOME_ENV_VAR",
    "ENABLE_EXPERIMENTAL_ENV",
    "DEFAULT_HOME_DIRNAME",
    "PROFILES_DIRNAME",
    "CONFIG_DIRNAME",
    "CONFIG_FILENAME",
    "ALL_INSTANCES_CONFIG_FILENAME",
    "UPDATE_MARKER_FILENAME",
    "LOGS_DIRNAME",
    "LOG_FILENAME",
    "PROFILE_CMD",
    "PROFILE_CMD_ALIASES",
    "PROFILE_SET_CMD",
    "PROFILE_FLAG",
    "START_CMD",
    "SHOW_LIBMACHINE_LOGS",
    "NO_BOOTSTRAP_COMMANDS",
    "SYNCED_FLAGS",
    "INVALID_PROFILE_NAME",
]
