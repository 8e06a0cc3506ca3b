from __future__ import annotations

import pytest

from minishift.core.bootstrap import EMPTY_CONFIG, DirectoryBootstrapper
from minishift.core.errors import BootstrapError


def test_creates_every_instance_directory(resolver):
    paths = resolver.derive("minishift")
    boot = DirectoryBootstrapper(paths, resolver.all_instances_config_path)

    assert boot.ensure() is True

    for _, path in paths.instance_dirs.entries():
        assert path.is_dir()
    assert resolver.all_instances_config_path.parent.is_dir()
    assert paths.config_file.read_text(encoding="utf-8") == EMPTY_CONFIG


def test_named_profile_lives_under_profiles(resolver):
    paths = resolver.derive("dev")
    DirectoryBootstrapper(paths, resolver.all_instances_config_path).ensure()

    assert (resolver.root / "profiles" / "dev" / "machines").is_dir()
    assert paths.config_file == resolver.root / "profiles" / "dev" / "config" / "config.json"


def test_second_run_is_idempotent(resolver):
    paths = resolver.derive("dev")
    DirectoryBootstrapper(paths, resolver.all_instances_config_path).ensure()
    paths.config_file.write_text('{"memory": "4GB"}', encoding="utf-8")

    again = DirectoryBootstrapper(paths, resolver.all_instances_config_path)

    assert again.ensure() is False
    assert again.addons_install_required is False
    assert paths.config_file.read_text(encoding="utf-8") == '{"memory": "4GB"}'


def test_addon_flag_sampled_before_creation(resolver):
    paths = resolver.derive("minishift")
    paths.instance_dirs.machines.mkdir(parents=True)

    boot = DirectoryBootstrapper(paths, resolver.all_instances_config_path)

    assert boot.ensure() is True
    assert paths.instance_dirs.addons.is_dir()


def test_directory_creation_failure_is_fatal(resolver):
    resolver.root.parent.mkdir(parents=True, exist_ok=True)
    # A regular file where the home directory should be.
    resolver.root.write_text("", encoding="utf-8")
    paths = resolver.derive("minishift")

    with pytest.raises(BootstrapError, match="Error creating directory"):
        DirectoryBootstrapper(paths, resolver.all_instances_config_path).ensure()
