"""Default add-on installation.

Default add-ons ship inside ``minishift.data/addons``; ``catalog.yaml``
lists the ones unpacked into a profile.
"""
from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List

from minishift.core.errors import BootstrapError
from minishift.core.utils.io import ensure_directory
from minishift.data import get_data_path, read_yaml

logger = logging.getLogger(__name__)


def default_assets() -> List[str]:
    catalog = read_yaml("addons", "catalog.yaml") or {}
    return [str(name) for name in catalog.get("defaults") or []]


def unpack_addons(target_dir: Path) -> List[str]:
    """Copy every default add-on into ``target_dir``, replacing older copies.

    Returns:
        Names of the installed add-ons.

    Raises:
        BootstrapError: If an add-on is missing from the bundle or cannot be copied.
    """
    target_dir = Path(target_dir)
    names = default_assets()
    try:
        ensure_directory(target_dir)
        for name in names:
            source = get_data_path("addons", name)
            if not source.is_dir():
                raise BootstrapError(f"Bundled add-on '{name}' not found")
            shutil.copytree(source, target_dir / name, dirs_exist_ok=True)
            logger.debug("Unpacked add-on %s into %s", name, target_dir)
    except OSError as exc:
        raise BootstrapError(f"Cannot unpack add-ons into '{target_dir}': {exc}") from exc
    return names


__all__ = ["default_assets", "unpack_addons"]
