"""Effective configuration for one minishift invocation."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from minishift.core.constants import ENV_PREFIX
from minishift.core.errors import ConfigError
from minishift.core.utils.io import read_json

from .flags import FlagSet, coerce_value, kind_of

logger = logging.getLogger(__name__)

_UNSET = object()


class ConfigMerger:
    """Layer flags, environment, the profile config file and defaults.

    Lookup precedence (highest to lowest):
    1. Values forced with :meth:`set` (flag synchronisation uses this)
    2. Flags explicitly passed on the command line
    3. Environment variables: MINISHIFT_<KEY> ('-' replaced by '_', upper-cased)
    4. The profile's persisted JSON config file
    5. Defaults registered per flag

    Environment lookups are automatic for every key, registered or not.
    Values read from the environment are coerced to the kind of the flag
    (or default) registered under the same key.
    """

    def __init__(
        self,
        *,
        env_prefix: str = ENV_PREFIX,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.env_prefix = env_prefix
        self._environ = os.environ if environ is None else environ
        self._overrides: Dict[str, Any] = {}
        self._config: Dict[str, Any] = {}
        self._defaults: Dict[str, Any] = {}
        self._flags: Optional[FlagSet] = None
        self.config_file: Optional[Path] = None

    # ---------- sources ----------

    def read_config_file(self, path: Path) -> bool:
        """Load the profile's JSON config file.

        A missing, unreadable or malformed file is not fatal: a warning is
        logged and the file layer stays empty.

        Returns:
            True when the file was loaded.
        """
        self.config_file = Path(path)
        self._config = {}
        try:
            data = read_json(self.config_file)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Error reading config file at '%s': %s", self.config_file, exc)
            return False
        if not isinstance(data, dict):
            logger.warning(
                "Error reading config file at '%s': expected a JSON object, got %s",
                self.config_file,
                type(data).__name__,
            )
            return False
        self._config = dict(data)
        return True

    def bind_flags(self, flags: FlagSet) -> None:
        """Use ``flags`` as the command-line layer and register their defaults."""
        self._flags = flags
        for f in flags:
            self.set_default(f.name, f.default)

    def set_default(self, key: str, value: Any) -> None:
        self._defaults[key] = value

    def set(self, key: str, value: Any) -> None:
        self._overrides[key] = value

    def env_key(self, key: str) -> str:
        return f"{self.env_prefix}_{key.replace('-', '_').upper()}"

    # ---------- lookups ----------

    def _kind_for(self, key: str) -> Optional[str]:
        flag = self._flags.lookup(key) if self._flags is not None else None
        if flag is not None:
            return flag.kind
        if key in self._defaults and self._defaults[key] is not None:
            return kind_of(self._defaults[key])
        return None

    def _from_override(self, key: str) -> Any:
        return self._overrides.get(key, _UNSET)

    def _from_flag(self, key: str) -> Any:
        if self._flags is None:
            return _UNSET
        flag = self._flags.lookup(key)
        if flag is None or not flag.changed:
            return _UNSET
        return flag.value

    def _from_env(self, key: str) -> Any:
        raw = self._environ.get(self.env_key(key))
        if raw is None:
            return _UNSET
        kind = self._kind_for(key)
        if kind is None:
            return raw
        try:
            return coerce_value(kind, raw)
        except ValueError as exc:
            logger.warning("Ignoring %s: %s", self.env_key(key), exc)
            return _UNSET

    def _from_config(self, key: str) -> Any:
        return self._config.get(key, _UNSET)

    def _from_default(self, key: str) -> Any:
        return self._defaults.get(key, _UNSET)

    def get(self, key: str, default: Any = None) -> Any:
        for layer in (
            self._from_override,
            self._from_flag,
            self._from_env,
            self._from_config,
            self._from_default,
        ):
            value = layer(key)
            if value is not _UNSET:
                return value
        return default

    def is_set(self, key: str) -> bool:
        return self.get(key, _UNSET) is not _UNSET

    def get_string(self, key: str) -> str:
        return coerce_value("str", self.get(key, ""))

    def get_bool(self, key: str) -> bool:
        value = self.get(key, False)
        try:
            return coerce_value("bool", value)
        except ValueError as exc:
            logger.warning("Treating '%s' as false: %s", key, exc)
            return False

    def get_int(self, key: str) -> int:
        value = self.get(key, 0)
        try:
            return coerce_value("int", value)
        except ValueError as exc:
            logger.warning("Treating '%s' as 0: %s", key, exc)
            return 0

    def keys(self) -> List[str]:
        names = set(self._defaults) | set(self._config) | set(self._overrides)
        if self._flags is not None:
            names |= {f.name for f in self._flags if f.changed}
        return sorted(names)

    def all_settings(self) -> Dict[str, Any]:
        """Return the effective value of every known key."""
        return {key: self.get(key) for key in self.keys()}

    # ---------- flag synchronisation ----------

    def sync_flags(self, names: Iterable[str]) -> None:
        """Reconcile ``names`` between the flag set and the merged view.

        Runs for every listed flag whether or not it was passed: the
        flag's default is registered, an explicit flag value is pinned as
        an override, and the effective value is written back into the
        flag (which is then considered set).
        """
        if self._flags is None:
            raise ConfigError("Flags must be bound before they can be synchronised")
        for name in names:
            flag = self._flags.lookup(name)
            if flag is None:
                raise ConfigError(f"Unknown flag '{name}'")
            self.set_default(name, flag.default)
            if flag.changed:
                self.set(name, flag.value)
            try:
                flag.set(self.get_string(name))
            except ValueError as exc:
                logger.warning("Keeping default for flag '%s': %s", name, exc)
                flag.value = flag.default
                flag.changed = True


__all__ = ["ConfigMerger"]
