from __future__ import annotations

import json

import pytest

from minishift.core.utils.io import (
    ensure_directory,
    read_json,
    read_text,
    update_json,
    write_json_atomic,
    write_text,
)


def test_write_json_atomic_format(tmp_path):
    path = tmp_path / "nested" / "doc.json"

    write_json_atomic(path, {"b": 1, "a": {"c": True}})

    assert path.read_text(encoding="utf-8") == '{\n  "a": {\n    "c": true\n  },\n  "b": 1\n}\n'
    assert list(path.parent.iterdir()) == [path]


def test_read_json_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_json(tmp_path / "missing.json")
    assert read_json(tmp_path / "missing.json", default={}) == {}


def test_update_json_starts_from_empty(tmp_path):
    path = tmp_path / "config.json"

    result = update_json(path, lambda d: {**d, "memory": "4GB"})

    assert result == {"memory": "4GB"}
    assert json.loads(path.read_text(encoding="utf-8")) == {"memory": "4GB"}


def test_update_json_in_place_mutation(tmp_path):
    path = tmp_path / "config.json"
    write_json_atomic(path, {"cpus": 2})

    def _drop(data):
        data.pop("cpus")

    assert update_json(path, _drop) == {}


def test_update_json_rejects_non_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(ValueError):
        update_json(path, lambda d: d)


def test_text_round_trip(tmp_path):
    path = tmp_path / "a" / "b.txt"
    write_text(path, "{}")
    assert read_text(path) == "{}"


def test_ensure_directory(tmp_path):
    target = tmp_path / "x" / "y"
    assert ensure_directory(target) == target
    assert target.is_dir()

    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        ensure_directory(blocker)
    with pytest.raises(FileNotFoundError):
        ensure_directory(tmp_path / "absent", create=False)
