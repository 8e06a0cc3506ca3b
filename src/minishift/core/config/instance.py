"""Per-machine state stored at ``<profileHome>/machines/<machine>.json``."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from minishift.core.errors import ConfigError
from minishift.core.schemas import validate_payload
from minishift.core.utils.io import read_json, write_json_atomic

SCHEMA_NAME = "instance-config"


class InstanceConfig:
    def __init__(self, path: Path, data: Optional[Dict[str, Any]] = None) -> None:
        self.path = Path(path)
        self._data: Dict[str, Any] = dict(data or {})

    @classmethod
    def load(cls, path: Path) -> "InstanceConfig":
        """Load the machine config at ``path``; write ``{}`` there if absent.

        Raises:
            ConfigError: If the file cannot be read, written or parsed as an object.
        """
        path = Path(path)
        if not path.exists():
            cfg = cls(path)
            cfg.write()
            return cfg
        try:
            data = read_json(path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Cannot read '{path}': {exc}") from exc
        validate_payload(data, SCHEMA_NAME)
        return cls(path, data)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def write(self) -> None:
        try:
            write_json_atomic(self.path, self._data)
        except OSError as exc:
            raise ConfigError(f"Cannot write '{self.path}': {exc}") from exc


__all__ = ["InstanceConfig"]
