"""minishift configuration system.

Usage:
    from minishift.core.config import ConfigMerger, load_global_flags

    flags = load_global_flags(log_dir_default=resolver.default_log_dir)
    merger = ConfigMerger()
    merger.read_config_file(paths.config_file)
    merger.bind_flags(flags)
    merger.sync_flags(SYNCED_FLAGS)
    merger.get_bool("show-libmachine-logs")
"""
from __future__ import annotations

from .all_instances import ACTIVE_PROFILE_KEY, AllInstancesConfig
from .flags import Flag, FlagSet, coerce_value, load_global_flags
from .instance import InstanceConfig
from .merger import ConfigMerger

__all__ = [
    "ACTIVE_PROFILE_KEY",
    "AllInstancesConfig",
    "ConfigMerger",
    "Flag",
    "FlagSet",
    "InstanceConfig",
    "coerce_value",
    "load_global_flags",
]
