"""Per-invocation bootstrap of the selected profile.

Every command other than ``version`` and ``completion`` runs
:meth:`BootstrapSequence.run` after the command line is parsed and before
the command body executes. The result is a :class:`BootstrapContext`
handed to the command; nothing is stored in module globals.
"""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Sequence, TextIO

from minishift.core.addons import unpack_addons
from minishift.core.cluster_context import set_oc_context
from minishift.core.config import (
    AllInstancesConfig,
    ConfigMerger,
    FlagSet,
    InstanceConfig,
)
from minishift.core.constants import (
    DEFAULT_PROFILE_NAME,
    ENABLE_EXPERIMENTAL_ENV,
    NO_BOOTSTRAP_COMMANDS,
    SHOW_LIBMACHINE_LOGS,
    SYNCED_FLAGS,
)
from minishift.core.errors import BootstrapError, BooleanFormatError, ConfigError, MinishiftError
from minishift.core.paths import PathResolver, ProfilePaths
from minishift.core.stdlib_logging import (
    configure_libmachine_logging,
    configure_logging,
    is_verbose,
)
from minishift.core.utils.env import get_bool_env
from minishift.core.version import get_commit_sha, get_minishift_version

from .directories import DirectoryBootstrapper
from .guard import ActiveProfileGuard
from .post_upgrade import PostUpgradeRunner
from .profile_name import ProfileNameResolver

logger = logging.getLogger(__name__)


def _switch_oc_context(paths: ProfilePaths) -> bool:
    return set_oc_context(paths.profile, kubeconfig=paths.kubeconfig)


@dataclass
class Collaborators:
    """Side effects the bootstrap delegates to; tests swap in fakes."""

    unpack_addons: Callable[[Path], List[str]] = unpack_addons
    set_cluster_context: Callable[[ProfilePaths], bool] = _switch_oc_context
    minishift_version: Callable[[], str] = get_minishift_version
    commit_sha: Callable[[], str] = get_commit_sha


@dataclass
class BootstrapContext:
    profile_name: str
    paths: ProfilePaths
    resolver: PathResolver
    flags: FlagSet
    config: ConfigMerger
    all_instances: AllInstancesConfig
    instance_config: InstanceConfig
    enable_experimental: bool = False
    collaborators: Collaborators = field(default_factory=Collaborators)
    addons_installed: List[str] = field(default_factory=list)
    post_upgrade_ran: bool = False

    def set_cluster_context(self, profile: str) -> bool:
        return self.collaborators.set_cluster_context(self.resolver.derive(profile))


class BootstrapSequence:
    """Prepare the profile home, configuration and logging for a command.

    Typical use from the CLI::

        seq = BootstrapSequence(flags)
        seq.process_environment()
        profile = seq.resolve_profile(argv)
        ...parse argv...
        ctx = seq.run(profile, command_path)
    """

    def __init__(
        self,
        flags: FlagSet,
        *,
        resolver: Optional[PathResolver] = None,
        environ: Optional[Mapping[str, str]] = None,
        collaborators: Optional[Collaborators] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.flags = flags
        self.resolver = resolver or PathResolver()
        self._environ = os.environ if environ is None else environ
        self.collaborators = collaborators or Collaborators()
        self._out = out
        self.enable_experimental = False
        self._names = ProfileNameResolver(self.resolver.all_instances_config_path)

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def process_environment(self) -> bool:
        """Read the experimental-features switch.

        Raises:
            BootstrapError: If the variable holds something other than a boolean.
        """
        try:
            self.enable_experimental = get_bool_env(ENABLE_EXPERIMENTAL_ENV, self._environ)
        except BooleanFormatError as exc:
            raise BootstrapError(f"Error enabling experimental features: {exc}") from exc
        return self.enable_experimental

    def resolve_profile(self, argv: Sequence[str]) -> str:
        """Return the profile governing ``argv``; the default when none is selected."""
        return self._names.resolve(argv) or DEFAULT_PROFILE_NAME

    @staticmethod
    def is_bootstrap_exempt(command_path: Sequence[str]) -> bool:
        path = tuple(command_path)
        return len(path) == 1 and path[0] in NO_BOOTSTRAP_COMMANDS

    def run(self, profile: str, command_path: Sequence[str] = ()) -> Optional[BootstrapContext]:
        """Bootstrap ``profile`` for the command at ``command_path``.

        Returns:
            The bootstrap context, or None for commands that skip bootstrap.

        Raises:
            MinishiftError: On any fatal condition; nothing after the failing
                step has run.
        """
        if self.is_bootstrap_exempt(command_path):
            return None

        profile = profile or DEFAULT_PROFILE_NAME
        guard = ActiveProfileGuard(
            self.resolver,
            set_cluster_context=lambda name: self.collaborators.set_cluster_context(
                self.resolver.derive(name)
            ),
        )
        guard.validate(profile, command_path)

        paths = self.resolver.derive(profile)
        dirs = DirectoryBootstrapper(paths, self.resolver.all_instances_config_path)
        addons_required = dirs.ensure()

        all_instances = self._names.all_instances
        if all_instances is None:
            try:
                all_instances = AllInstancesConfig.load(self.resolver.all_instances_config_path)
            except ConfigError as exc:
                raise BootstrapError(f"Error creating all instance config: {exc}") from exc
            self._names.all_instances = all_instances

        try:
            instance_config = InstanceConfig.load(paths.instance_config)
        except ConfigError as exc:
            raise BootstrapError(f"Error creating config for VM: {exc}") from exc

        config = self._configure(paths)

        installed: List[str] = []
        if addons_required:
            try:
                installed = self.collaborators.unpack_addons(paths.instance_dirs.addons)
            except MinishiftError as exc:
                raise BootstrapError(f"Error installing default add-ons : {exc}") from exc

        runner = PostUpgradeRunner(
            paths.instance_dirs.addons,
            unpack=self.collaborators.unpack_addons,
            current_version=self.collaborators.minishift_version,
            out=self._out,
        )
        try:
            upgraded = runner.run(paths.update_marker)
        except MinishiftError as exc:
            raise BootstrapError(f"Error in performing post update execution: {exc}") from exc

        if self.enable_experimental:
            logger.info("Experimental features are enabled")
        configure_libmachine_logging(
            show=config.get_bool(SHOW_LIBMACHINE_LOGS),
            debug=is_verbose(3),
        )

        guard.ensure_default_active(all_instances, profile)

        if is_verbose(2):
            print(
                f"-- minishift version: v{self.collaborators.minishift_version()}"
                f"+{self.collaborators.commit_sha()}",
                file=self.out,
            )

        return BootstrapContext(
            profile_name=profile,
            paths=paths,
            resolver=self.resolver,
            flags=self.flags,
            config=config,
            all_instances=all_instances,
            instance_config=instance_config,
            enable_experimental=self.enable_experimental,
            collaborators=self.collaborators,
            addons_installed=installed,
            post_upgrade_ran=upgraded,
        )

    def _configure(self, paths: ProfilePaths) -> ConfigMerger:
        config = ConfigMerger(environ=self._environ)
        config.read_config_file(paths.config_file)
        config.bind_flags(self.flags)
        config.sync_flags(SYNCED_FLAGS)

        configure_logging(
            log_dir=Path(self.flags.lookup("log_dir").value or self.resolver.default_log_dir),
            verbosity=self.flags.lookup("v").value,
            also_to_stderr=self.flags.lookup("alsologtostderr").value,
        )
        return config


__all__ = ["BootstrapContext", "BootstrapSequence", "Collaborators"]
