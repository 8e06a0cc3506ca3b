"""Global flag registry.

A :class:`Flag` remembers its registered default, its current value and
whether the user set it explicitly. The merged configuration writes back
into some flags so that code reading them directly (the logging setup)
sees the same values as code reading the merged view.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional

from minishift.core.utils.env import parse_bool
from minishift.data import read_yaml

FLAG_KINDS = ("bool", "int", "str")


def coerce_value(kind: str, raw: Any) -> Any:
    """Convert ``raw`` to the Python type of a flag ``kind``.

    Raises:
        ValueError: If ``raw`` cannot be represented as ``kind``
            (BooleanFormatError for malformed booleans).
    """
    if kind == "bool":
        if isinstance(raw, bool):
            return raw
        return parse_bool(str(raw))
    if kind == "int":
        if isinstance(raw, bool):
            raise ValueError(f"invalid integer value {raw!r}")
        return int(str(raw).strip())
    if kind == "str":
        if raw is None:
            return ""
        if isinstance(raw, bool):
            return "true" if raw else "false"
        return str(raw)
    raise ValueError(f"Unknown flag kind: {kind}")


def kind_of(value: Any) -> str:
    """Infer a flag kind from a Python value."""
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    return "str"


@dataclass
class Flag:
    name: str
    kind: str
    default: Any
    help: str = ""
    short: Optional[str] = None
    value: Any = field(default=None)
    changed: bool = False

    def __post_init__(self) -> None:
        if self.kind not in FLAG_KINDS:
            raise ValueError(f"Unknown flag kind for '{self.name}': {self.kind}")
        if self.value is None:
            self.value = self.default

    @property
    def dest(self) -> str:
        """Attribute name used on an argparse namespace."""
        return self.name.replace("-", "_")

    def set(self, raw: Any) -> None:
        """Assign a new value and mark the flag as explicitly set."""
        self.value = coerce_value(self.kind, raw)
        self.changed = True


class FlagSet:
    """Ordered collection of flags, looked up by name."""

    def __init__(self, flags: Iterable[Flag] = ()) -> None:
        self._flags: Dict[str, Flag] = {}
        for f in flags:
            self.add(f)

    def add(self, flag: Flag) -> None:
        if flag.name in self._flags:
            raise ValueError(f"Flag redefined: {flag.name}")
        self._flags[flag.name] = flag

    def lookup(self, name: str) -> Optional[Flag]:
        return self._flags.get(name)

    def __iter__(self) -> Iterator[Flag]:
        return iter(self._flags.values())

    def __contains__(self, name: object) -> bool:
        return name in self._flags

    @property
    def names(self) -> List[str]:
        return list(self._flags)

    def apply_namespace(self, namespace: Any) -> None:
        """Mark flags present on a parsed namespace as explicitly set.

        Parsers register global flags with suppressed defaults, so an
        attribute only exists when the user passed the flag.
        """
        for f in self:
            if hasattr(namespace, f.dest):
                f.set(getattr(namespace, f.dest))


def load_global_flags(*, log_dir_default: Path) -> FlagSet:
    """Build the global flag set from bundled ``config/flags.yaml``."""
    data = read_yaml("config", "flags.yaml") or {}
    flags = FlagSet()
    for entry in data.get("flags") or []:
        default = entry.get("default")
        if entry["name"] == "log_dir" and default is None:
            default = str(log_dir_default)
        flags.add(
            Flag(
                name=entry["name"],
                kind=entry.get("kind", "str"),
                default=default,
                help=entry.get("help", ""),
                short=entry.get("short"),
            )
        )
    return flags


__all__ = ["Flag", "FlagSet", "coerce_value", "kind_of", "load_global_flags", "FLAG_KINDS"]
