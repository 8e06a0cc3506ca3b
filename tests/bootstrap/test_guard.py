from __future__ import annotations

import pytest

from minishift.core.bootstrap import ActiveProfileGuard, GuardState, creates_profile
from minishift.core.config import AllInstancesConfig
from minishift.core.constants import INVALID_PROFILE_NAME
from minishift.core.errors import BootstrapError, InvalidProfileNameError, ProfileNotFoundError


@pytest.mark.parametrize("name", ["my-profile", "dev_1", "a b", "dév", "", "abc\n"])
def test_non_alphanumeric_names_rejected(resolver, name):
    guard = ActiveProfileGuard(resolver)

    with pytest.raises(InvalidProfileNameError) as exc:
        guard.validate(name, ("profile", "set"))

    assert str(exc.value) == INVALID_PROFILE_NAME
    assert guard.state is GuardState.REJECTED_INVALID_NAME


def test_default_profile_always_valid(resolver):
    guard = ActiveProfileGuard(resolver)
    guard.validate("minishift", ("status",))
    assert guard.state is GuardState.VALID


def test_missing_profile_rejected_for_ordinary_commands(resolver):
    guard = ActiveProfileGuard(resolver)

    with pytest.raises(ProfileNotFoundError) as exc:
        guard.validate("abc", ("status",))

    assert "Profile 'abc' doesn't exist" in str(exc.value)
    assert "minishift start --profile abc" in str(exc.value)
    assert guard.state is GuardState.REJECTED_NONEXISTENT


@pytest.mark.parametrize(
    "command_path",
    [("start",), ("profile", "set"), ("profile", "list"), ("instance", "set"), ()],
)
def test_creating_commands_skip_existence_check(resolver, command_path):
    guard = ActiveProfileGuard(resolver)
    guard.validate("abc", command_path)
    assert guard.state is GuardState.VALID


def test_existing_profile_accepted(resolver):
    (resolver.profiles_dir / "abc").mkdir(parents=True)
    guard = ActiveProfileGuard(resolver)
    guard.validate("abc", ("config", "view"))
    assert guard.state is GuardState.VALID


def test_creates_profile():
    assert creates_profile(("start",))
    assert creates_profile(("profiles", "set"))
    assert not creates_profile(("config", "set"))
    assert not creates_profile(("version",))


def test_ensure_default_active_requires_config(resolver):
    guard = ActiveProfileGuard(resolver)
    guard.validate("minishift")

    with pytest.raises(BootstrapError, match="All instance config is not initialized"):
        guard.ensure_default_active(None, "minishift")


def test_ensure_default_active_requires_validation(resolver, tmp_path):
    cfg = AllInstancesConfig.load(tmp_path / "allinstances.json")

    with pytest.raises(BootstrapError):
        ActiveProfileGuard(resolver).ensure_default_active(cfg, "minishift")


def test_default_activated_and_context_switched(resolver, tmp_path):
    switched = []
    cfg = AllInstancesConfig.load(tmp_path / "allinstances.json")
    guard = ActiveProfileGuard(resolver, set_cluster_context=switched.append)
    guard.validate("minishift")

    assert guard.ensure_default_active(cfg, "minishift") is True
    assert guard.state is GuardState.ACTIVE_SET
    assert switched == ["minishift"]
    assert AllInstancesConfig.load(cfg.path).active_profile == "minishift"


def test_default_activated_without_context_for_other_profile(resolver, tmp_path):
    switched = []
    cfg = AllInstancesConfig.load(tmp_path / "allinstances.json")
    guard = ActiveProfileGuard(resolver, set_cluster_context=switched.append)
    guard.validate("abc", ("start",))

    assert guard.ensure_default_active(cfg, "abc") is True
    assert cfg.active_profile == "minishift"
    assert switched == []


def test_existing_active_profile_left_alone(resolver, tmp_path):
    switched = []
    cfg = AllInstancesConfig(tmp_path / "allinstances.json", {"activeProfile": "dev"})
    guard = ActiveProfileGuard(resolver, set_cluster_context=switched.append)
    guard.validate("minishift")

    assert guard.ensure_default_active(cfg, "minishift") is False
    assert cfg.active_profile == "dev"
    assert switched == []
    assert not cfg.path.exists()
