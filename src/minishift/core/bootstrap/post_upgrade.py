"""One-shot maintenance after ``minishift update``.

The update command leaves a marker file in the profile home. The next
invocation consumes it: default add-ons are refreshed when requested and
the marker is deleted so the work never repeats.
"""
from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TextIO, Union

from minishift.core.addons import unpack_addons
from minishift.core.errors import MinishiftError, PostUpgradeError
from minishift.core.schemas import validate_payload_safe
from minishift.core.utils.io import write_json_atomic
from minishift.core.version import get_minishift_version

logger = logging.getLogger(__name__)

SCHEMA_NAME = "update-marker"


@dataclass
class UpdateMarker:
    previous_version: str = ""
    install_addon: bool = False

    @classmethod
    def parse(cls, text: Union[str, bytes]) -> "UpdateMarker":
        """Parse marker content; anything unusable reads as a zero value.

        Field names match case-insensitively.
        """
        try:
            data: Any = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Malformed update marker: %s", exc)
            return cls()
        if not isinstance(data, dict):
            logger.warning("Malformed update marker: expected a JSON object")
            return cls()

        for problem in validate_payload_safe(data, SCHEMA_NAME):
            logger.warning("Update marker: %s", problem)

        fields = {str(key).lower(): value for key, value in data.items()}
        previous = fields.get("previousversion")
        install = fields.get("installaddon")
        return cls(
            previous_version=previous if isinstance(previous, str) else "",
            install_addon=install if isinstance(install, bool) else False,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"PreviousVersion": self.previous_version, "InstallAddon": self.install_addon}

    def write(self, path: Path) -> None:
        write_json_atomic(path, self.to_dict())


class PostUpgradeRunner:
    def __init__(
        self,
        addons_dir: Path,
        *,
        unpack: Callable[[Path], List[str]] = unpack_addons,
        current_version: Callable[[], str] = get_minishift_version,
        out: Optional[TextIO] = None,
    ) -> None:
        self.addons_dir = Path(addons_dir)
        self._unpack = unpack
        self._current_version = current_version
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def run(self, marker_path: Path) -> bool:
        """Consume the marker at ``marker_path``.

        Returns:
            False when there was no marker, True once it has been consumed.

        Raises:
            PostUpgradeError: If the marker cannot be read or deleted.
        """
        path = Path(marker_path)
        if not path.exists():
            return False

        try:
            marker = UpdateMarker.parse(path.read_bytes())
        except OSError as exc:
            raise PostUpgradeError(f"Cannot read update marker '{path}': {exc}") from exc

        if marker.install_addon:
            self._install_addons(marker)

        try:
            path.unlink()
        except OSError as exc:
            raise PostUpgradeError(f"Cannot remove update marker '{path}': {exc}") from exc
        return True

    def _install_addons(self, marker: UpdateMarker) -> None:
        out = self.out
        print(
            f"Minishift was upgraded from v{marker.previous_version} to "
            f"v{self._current_version()}. Running post update actions.",
            file=out,
        )
        print("--- Updating default add-ons ... ", end="", file=out)
        try:
            installed = self._unpack(self.addons_dir)
        except MinishiftError as exc:
            # The marker is still consumed below.
            print("FAILED", file=out)
            logger.warning("Updating default add-ons failed: %s", exc)
            return
        print("OK", file=out)
        print(f"Default add-ons '{', '.join(installed)}' installed", file=out)


__all__ = ["PostUpgradeRunner", "UpdateMarker"]
