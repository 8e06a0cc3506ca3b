from __future__ import annotations

import json
import logging

import pytest

from minishift.core.config import ConfigMerger, load_global_flags
from minishift.core.constants import SYNCED_FLAGS
from minishift.core.errors import ConfigError


@pytest.fixture
def flags(tmp_path):
    return load_global_flags(log_dir_default=tmp_path / "logs")


def _config_file(tmp_path, payload):
    path = tmp_path / "config.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


def test_empty_config_yields_only_defaults(tmp_path, flags):
    merger = ConfigMerger(environ={})
    assert merger.read_config_file(_config_file(tmp_path, "{}")) is True
    merger.bind_flags(flags)

    assert merger.all_settings() == {
        "alsologtostderr": False,
        "log_dir": str(tmp_path / "logs"),
        "profile": "minishift",
        "show-libmachine-logs": False,
        "v": 0,
    }


def test_precedence_flag_env_file_default(tmp_path, flags):
    merger = ConfigMerger(environ={"MINISHIFT_V": "3"})
    merger.read_config_file(_config_file(tmp_path, {"v": 2}))
    merger.bind_flags(flags)

    assert merger.get_int("v") == 3

    flags.lookup("v").set(5)
    assert merger.get_int("v") == 5

    merger.set("v", 7)
    assert merger.get_int("v") == 7


def test_config_file_beats_default(tmp_path, flags):
    merger = ConfigMerger(environ={})
    merger.read_config_file(_config_file(tmp_path, {"show-libmachine-logs": True, "memory": "4GB"}))
    merger.bind_flags(flags)

    assert merger.get_bool("show-libmachine-logs") is True
    assert merger.get("memory") == "4GB"


def test_env_key_transform():
    merger = ConfigMerger(environ={})
    assert merger.env_key("show-libmachine-logs") == "MINISHIFT_SHOW_LIBMACHINE_LOGS"
    assert merger.env_key("log_dir") == "MINISHIFT_LOG_DIR"


def test_env_values_coerced_to_flag_kind(tmp_path, flags):
    merger = ConfigMerger(environ={"MINISHIFT_SHOW_LIBMACHINE_LOGS": "T", "MINISHIFT_CPUS": "4"})
    merger.read_config_file(_config_file(tmp_path, {}))
    merger.bind_flags(flags)

    assert merger.get("show-libmachine-logs") is True
    # Unregistered keys are read as plain strings.
    assert merger.get("cpus") == "4"


def test_malformed_env_bool_falls_through(tmp_path, flags, caplog):
    merger = ConfigMerger(environ={"MINISHIFT_SHOW_LIBMACHINE_LOGS": "sometimes"})
    merger.read_config_file(_config_file(tmp_path, {"show-libmachine-logs": True}))
    merger.bind_flags(flags)

    with caplog.at_level(logging.WARNING):
        assert merger.get_bool("show-libmachine-logs") is True
    assert "MINISHIFT_SHOW_LIBMACHINE_LOGS" in caplog.text


@pytest.mark.parametrize("payload", ["{oops", "[1, 2, 3]"])
def test_malformed_config_file_is_not_fatal(tmp_path, flags, caplog, payload):
    merger = ConfigMerger(environ={})

    with caplog.at_level(logging.WARNING):
        assert merger.read_config_file(_config_file(tmp_path, payload)) is False
    merger.bind_flags(flags)

    assert "Error reading config file" in caplog.text
    assert merger.get_int("v") == 0


def test_missing_config_file_is_not_fatal(tmp_path, flags, caplog):
    merger = ConfigMerger(environ={})

    with caplog.at_level(logging.WARNING):
        assert merger.read_config_file(tmp_path / "nope.json") is False


def test_sync_writes_effective_values_into_flags(tmp_path, flags):
    merger = ConfigMerger(environ={"MINISHIFT_ALSOLOGTOSTDERR": "true"})
    merger.read_config_file(_config_file(tmp_path, {"v": 4}))
    merger.bind_flags(flags)

    merger.sync_flags(SYNCED_FLAGS)

    assert flags.lookup("v").value == 4
    assert flags.lookup("alsologtostderr").value is True
    assert flags.lookup("log_dir").value == str(tmp_path / "logs")
    assert all(flags.lookup(name).changed for name in SYNCED_FLAGS)


def test_sync_keeps_explicit_flag(tmp_path, flags):
    merger = ConfigMerger(environ={"MINISHIFT_V": "9"})
    merger.read_config_file(_config_file(tmp_path, {"v": 4}))
    merger.bind_flags(flags)
    flags.lookup("v").set("1")

    merger.sync_flags(["v"])

    assert flags.lookup("v").value == 1
    assert merger.get_int("v") == 1


def test_sync_with_bad_value_keeps_default(tmp_path, flags, caplog):
    merger = ConfigMerger(environ={})
    merger.read_config_file(_config_file(tmp_path, {"v": "loud"}))
    merger.bind_flags(flags)

    with caplog.at_level(logging.WARNING):
        merger.sync_flags(["v"])

    assert flags.lookup("v").value == 0


def test_sync_requires_bound_flags():
    with pytest.raises(ConfigError):
        ConfigMerger(environ={}).sync_flags(["v"])


def test_sync_rejects_unknown_flag(flags):
    merger = ConfigMerger(environ={})
    merger.bind_flags(flags)

    with pytest.raises(ConfigError, match="Unknown flag"):
        merger.sync_flags(["memory"])
