"""Materialise a profile's directory tree and required state files."""
from __future__ import annotations

import logging
from pathlib import Path

from minishift.core.errors import BootstrapError
from minishift.core.paths import InstanceDirs, ProfilePaths
from minishift.core.utils.io import DEFAULT_DIR_MODE, write_text

logger = logging.getLogger(__name__)

EMPTY_CONFIG = "{}"


class DirectoryBootstrapper:
    """Create whatever part of a profile's layout is missing.

    Safe to run on every invocation: existing directories and files are
    left untouched.
    """

    def __init__(self, paths: ProfilePaths, all_instances_path: Path, *, mode: int = DEFAULT_DIR_MODE) -> None:
        self.paths = paths
        self.all_instances_path = Path(all_instances_path)
        self.mode = mode
        self.addons_install_required = False

    def ensure(self) -> bool:
        """Bootstrap the profile.

        Returns:
            True when the add-on directory did not exist beforehand.

        Raises:
            BootstrapError: If any directory or the config file cannot be created.
        """
        dirs = self.paths.instance_dirs
        # Must be sampled before ensure_dirs creates it.
        self.addons_install_required = not dirs.addons.exists()

        self.ensure_dirs(dirs)
        self.ensure_all_instances_config_path()
        self.ensure_config_file()
        return self.addons_install_required

    def ensure_dirs(self, dirs: InstanceDirs) -> None:
        for name, path in dirs.entries():
            try:
                path.mkdir(mode=self.mode, parents=True, exist_ok=True)
            except OSError as exc:
                raise BootstrapError(f"Error creating directory: {path}") from exc
            logger.debug("Instance dir %s: %s", name, path)

    def ensure_all_instances_config_path(self) -> None:
        config_dir = self.all_instances_path.parent
        try:
            config_dir.mkdir(mode=self.mode, parents=True, exist_ok=True)
        except OSError as exc:
            raise BootstrapError(f"Error creating directory: {config_dir}") from exc

    def ensure_config_file(self) -> None:
        config_file = self.paths.config_file
        if config_file.exists():
            return
        try:
            write_text(config_file, EMPTY_CONFIG)
        except OSError as exc:
            raise BootstrapError(f"Cannot create file '{config_file}': {exc}") from exc


__all__ = ["DirectoryBootstrapper", "EMPTY_CONFIG"]
