"""Shared helpers for config commands."""
from __future__ import annotations

from typing import Any

from minishift.core.config import FlagSet, coerce_value
from minishift.core.errors import ConfigError


def coerce_for_key(flags: FlagSet, key: str, raw: str) -> Any:
    """Convert ``raw`` to the type of the flag named ``key``; strings otherwise.

    Raises:
        ConfigError: If ``raw`` does not fit the flag's type.
    """
    flag = flags.lookup(key)
    if flag is None:
        return raw
    try:
        return coerce_value(flag.kind, raw)
    except ValueError as exc:
        raise ConfigError(f"Cannot set '{key}': {exc}") from exc
