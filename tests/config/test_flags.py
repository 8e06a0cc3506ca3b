from __future__ import annotations

import argparse

import pytest

from minishift.core.config import Flag, FlagSet, coerce_value, load_global_flags
from minishift.core.errors import BooleanFormatError


def test_global_flags_declared_in_bundled_data(tmp_path):
    flags = load_global_flags(log_dir_default=tmp_path)

    assert flags.names == ["show-libmachine-logs", "profile", "v", "alsologtostderr", "log_dir"]
    assert flags.lookup("log_dir").default == str(tmp_path)
    assert flags.lookup("v").short == "v"
    assert not any(f.changed for f in flags)


@pytest.mark.parametrize(
    "kind,raw,expected",
    [
        ("bool", "1", True),
        ("bool", "F", False),
        ("bool", True, True),
        ("int", " 3 ", 3),
        ("str", None, ""),
        ("str", False, "false"),
        ("str", 2, "2"),
    ],
)
def test_coerce_value(kind, raw, expected):
    assert coerce_value(kind, raw) == expected


def test_coerce_value_rejects_bad_input():
    with pytest.raises(BooleanFormatError):
        coerce_value("bool", "yes")
    with pytest.raises(ValueError):
        coerce_value("int", "many")
    with pytest.raises(ValueError):
        coerce_value("int", True)


def test_flag_set_marks_changed():
    flag = Flag(name="show-libmachine-logs", kind="bool", default=False)

    assert flag.dest == "show_libmachine_logs"
    flag.set("true")
    assert flag.value is True
    assert flag.changed is True


def test_duplicate_flag_rejected():
    flags = FlagSet([Flag(name="v", kind="int", default=0)])
    with pytest.raises(ValueError):
        flags.add(Flag(name="v", kind="int", default=1))


def test_apply_namespace_only_marks_present_attributes(tmp_path):
    flags = load_global_flags(log_dir_default=tmp_path)
    flags.apply_namespace(argparse.Namespace(v=2, profile="dev"))

    assert flags.lookup("v").value == 2
    assert flags.lookup("profile").changed is True
    assert flags.lookup("alsologtostderr").changed is False
