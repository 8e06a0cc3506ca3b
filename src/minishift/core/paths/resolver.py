"""Profile path resolution for minishift.

Every profile owns a home directory. The default profile keeps the
historical layout directly under the minishift root; any other profile
lives under ``<root>/profiles/<name>``.

Root precedence (highest to lowest):
1. Environment variable: MINISHIFT_HOME
2. Hardcoded fallback: ~/.minishift
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from minishift.core.constants import (
    ALL_INSTANCES_CONFIG_FILENAME,
    CONFIG_DIRNAME,
    CONFIG_FILENAME,
    DEFAULT_HOME_DIRNAME,
    DEFAULT_PROFILE_NAME,
    HOME_ENV_VAR,
    LOGS_DIRNAME,
    PROFILES_DIRNAME,
    UPDATE_MARKER_FILENAME,
)


def get_minishift_root(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the absolute minishift root directory.

    Relative ``MINISHIFT_HOME`` values are resolved against the user's home
    directory, not the CWD.
    """
    env = os.environ if environ is None else environ
    raw = (env.get(HOME_ENV_VAR) or "").strip()
    if not raw:
        return (Path.home() / DEFAULT_HOME_DIRNAME).resolve()

    p = Path(raw).expanduser()
    if not p.is_absolute():
        p = Path.home() / p
    return p.resolve()


@dataclass(frozen=True)
class InstanceDirs:
    """The fixed set of directories making up a profile's footprint."""

    home: Path
    machines: Path
    certs: Path
    addons: Path
    cache: Path
    iso_cache: Path
    oc_cache: Path
    image_cache: Path
    config: Path
    tmp: Path
    logs: Path

    @classmethod
    def for_home(cls, home: Path) -> "InstanceDirs":
        home = Path(home)
        cache = home / "cache"
        return cls(
            home=home,
            machines=home / "machines",
            certs=home / "certs",
            addons=home / "addons",
            cache=cache,
            iso_cache=cache / "iso",
            oc_cache=cache / "oc",
            image_cache=cache / "images",
            config=home / CONFIG_DIRNAME,
            tmp=home / "tmp",
            logs=home / LOGS_DIRNAME,
        )

    def entries(self) -> Tuple[Tuple[str, Path], ...]:
        """Return ``(name, path)`` pairs in creation order."""
        return (
            ("home", self.home),
            ("machines", self.machines),
            ("certs", self.certs),
            ("addons", self.addons),
            ("cache", self.cache),
            ("iso_cache", self.iso_cache),
            ("oc_cache", self.oc_cache),
            ("image_cache", self.image_cache),
            ("config", self.config),
            ("tmp", self.tmp),
            ("logs", self.logs),
        )


@dataclass(frozen=True)
class ProfilePaths:
    """Files and directories derived from a profile name."""

    profile: str
    home_dir: Path
    config_file: Path
    instance_config: Path
    kubeconfig: Path
    update_marker: Path

    @property
    def machine_name(self) -> str:
        return self.profile

    @property
    def instance_dirs(self) -> InstanceDirs:
        return InstanceDirs.for_home(self.home_dir)


class PathResolver:
    """Derive profile paths from a profile name and a fixed root.

    ``derive`` does no I/O; the root is read once at construction.

    Examples:
        >>> resolver = PathResolver(Path("/home/dev/.minishift"))
        >>> resolver.derive("minishift").home_dir
        PosixPath('/home/dev/.minishift')
        >>> resolver.derive("dev").config_file
        PosixPath('/home/dev/.minishift/profiles/dev/config/config.json')
    """

    def __init__(self, root: Optional[Path] = None) -> None:
        self.root = Path(root) if root is not None else get_minishift_root()

    @property
    def profiles_dir(self) -> Path:
        return self.root / PROFILES_DIRNAME

    @property
    def all_instances_config_path(self) -> Path:
        return self.root / CONFIG_DIRNAME / ALL_INSTANCES_CONFIG_FILENAME

    @property
    def default_log_dir(self) -> Path:
        return self.root / LOGS_DIRNAME

    def profile_home(self, profile: str) -> Path:
        if not profile or profile == DEFAULT_PROFILE_NAME:
            return self.root
        return self.profiles_dir / profile

    def derive(self, profile: str) -> ProfilePaths:
        name = profile or DEFAULT_PROFILE_NAME
        home = self.profile_home(name)
        machines = home / "machines"
        return ProfilePaths(
            profile=name,
            home_dir=home,
            config_file=home / CONFIG_DIRNAME / CONFIG_FILENAME,
            instance_config=machines / f"{name}.json",
            kubeconfig=machines / f"{name}_kubeconfig",
            update_marker=home / UPDATE_MARKER_FILENAME,
        )


__all__ = [
    "get_minishift_root",
    "InstanceDirs",
    "ProfilePaths",
    "PathResolver",
]
