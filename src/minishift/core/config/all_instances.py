"""Process-wide record of which profile is active."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from minishift.core.errors import ConfigError
from minishift.core.schemas import validate_payload
from minishift.core.utils.io import read_text, write_json_atomic

logger = logging.getLogger(__name__)

SCHEMA_NAME = "all-instances"
ACTIVE_PROFILE_KEY = "activeProfile"


class AllInstancesConfig:
    """The all-instances config document.

    Created with no active profile the first time it is loaded from a path
    that does not exist. Unknown keys are preserved on write.
    """

    def __init__(self, path: Path, data: Optional[Dict[str, Any]] = None) -> None:
        self.path = Path(path)
        self._data: Dict[str, Any] = dict(data or {})

    @classmethod
    def load(cls, path: Path) -> "AllInstancesConfig":
        """Load the document at ``path``, creating it when absent.

        An empty file reads as an empty document.

        Raises:
            ConfigError: If the file cannot be read, is not valid JSON or
                does not match the all-instances schema.
        """
        path = Path(path)
        if not path.exists():
            cfg = cls(path, {ACTIVE_PROFILE_KEY: ""})
            cfg.write()
            logger.debug("Created all-instances config at %s", path)
            return cfg

        try:
            text = read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Cannot read '{path}': {exc}") from exc

        data: Any = {}
        if text.strip():
            try:
                data = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"Cannot parse '{path}': {exc}") from exc

        validate_payload(data, SCHEMA_NAME)
        return cls(path, data)

    @property
    def active_profile(self) -> str:
        return str(self._data.get(ACTIVE_PROFILE_KEY) or "")

    @active_profile.setter
    def active_profile(self, name: str) -> None:
        self._data[ACTIVE_PROFILE_KEY] = name

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def write(self) -> None:
        """Persist the document atomically.

        Raises:
            ConfigError: If the file cannot be written.
        """
        try:
            write_json_atomic(self.path, self._data)
        except OSError as exc:
            raise ConfigError(f"Cannot write '{self.path}': {exc}") from exc


__all__ = ["AllInstancesConfig", "ACTIVE_PROFILE_KEY"]
