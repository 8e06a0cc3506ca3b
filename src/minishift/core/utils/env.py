"""Environment variable parsing."""
from __future__ import annotations

import os
from typing import Mapping, Optional

from minishift.core.errors import BooleanFormatError

_TRUE_VALUES = {"1", "t", "true"}
_FALSE_VALUES = {"0", "f", "false"}


def parse_bool(raw: str) -> bool:
    """Parse a boolean flag or environment value.

    Accepts 1/t/true and 0/f/false in any letter case.

    Raises:
        BooleanFormatError: For any other value.
    """
    low = str(raw).strip().lower()
    if low in _TRUE_VALUES:
        return True
    if low in _FALSE_VALUES:
        return False
    raise BooleanFormatError(f"invalid boolean value {raw!r}")


def get_bool_env(name: str, environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return the boolean value of env var ``name``; unset or empty means False."""
    env = os.environ if environ is None else environ
    raw = env.get(name, "")
    if not raw:
        return False
    try:
        return parse_bool(raw)
    except BooleanFormatError as exc:
        raise BooleanFormatError(f"{name}: {exc}") from exc


__all__ = ["parse_bool", "get_bool_env"]
