from __future__ import annotations

import io
import json
import os

import pytest

from minishift.core.bootstrap import PostUpgradeRunner, UpdateMarker
from minishift.core.errors import BootstrapError, PostUpgradeError


class FakeUnpacker:
    def __init__(self, names=("admin-user", "anyuid"), error=None):
        self.names = list(names)
        self.error = error
        self.calls = []

    def __call__(self, target_dir):
        self.calls.append(target_dir)
        if self.error is not None:
            raise self.error
        return self.names


def _runner(tmp_path, unpack, out):
    return PostUpgradeRunner(
        tmp_path / "addons",
        unpack=unpack,
        current_version=lambda: "1.34.3",
        out=out,
    )


def _write_marker(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")


def test_no_marker_is_noop(tmp_path):
    unpack = FakeUnpacker()
    out = io.StringIO()

    assert _runner(tmp_path, unpack, out).run(tmp_path / "updatemarker") is False
    assert unpack.calls == []
    assert out.getvalue() == ""


def test_marker_without_addon_install_is_deleted(tmp_path):
    marker = tmp_path / "updatemarker"
    _write_marker(marker, {"PreviousVersion": "1.33.0", "InstallAddon": False})
    unpack = FakeUnpacker()

    assert _runner(tmp_path, unpack, io.StringIO()).run(marker) is True
    assert unpack.calls == []
    assert not marker.exists()


def test_marker_with_addon_install_runs_once(tmp_path):
    marker = tmp_path / "updatemarker"
    _write_marker(marker, {"PreviousVersion": "1.33.0", "InstallAddon": True})
    unpack = FakeUnpacker()
    out = io.StringIO()
    runner = _runner(tmp_path, unpack, out)

    assert runner.run(marker) is True
    assert unpack.calls == [tmp_path / "addons"]
    assert not marker.exists()

    text = out.getvalue()
    assert "Minishift was upgraded from v1.33.0 to v1.34.3. Running post update actions." in text
    assert "--- Updating default add-ons ... OK" in text
    assert "Default add-ons 'admin-user, anyuid' installed" in text

    assert runner.run(marker) is False
    assert len(unpack.calls) == 1


@pytest.mark.parametrize("content", ["{broken", "[1, 2]", '{"InstallAddon": "yes"}', ""])
def test_malformed_marker_tolerated(tmp_path, content):
    marker = tmp_path / "updatemarker"
    marker.write_text(content, encoding="utf-8")
    unpack = FakeUnpacker()

    assert _runner(tmp_path, unpack, io.StringIO()).run(marker) is True
    assert unpack.calls == []
    assert not marker.exists()


def test_undecodable_marker_tolerated(tmp_path):
    marker = tmp_path / "updatemarker"
    marker.write_bytes(b"\xff\xfe{garbage")
    unpack = FakeUnpacker()

    assert _runner(tmp_path, unpack, io.StringIO()).run(marker) is True
    assert unpack.calls == []
    assert not marker.exists()


def test_addon_failure_still_consumes_marker(tmp_path):
    marker = tmp_path / "updatemarker"
    _write_marker(marker, {"PreviousVersion": "1.33.0", "InstallAddon": True})
    unpack = FakeUnpacker(error=BootstrapError("disk full"))
    out = io.StringIO()

    assert _runner(tmp_path, unpack, out).run(marker) is True
    assert "FAILED" in out.getvalue()
    assert not marker.exists()


@pytest.mark.skipif(os.geteuid() == 0, reason="root ignores directory permissions")
def test_marker_deletion_failure_is_fatal(tmp_path):
    home = tmp_path / "home"
    home.mkdir()
    marker = home / "updatemarker"
    _write_marker(marker, {"PreviousVersion": "1.33.0", "InstallAddon": False})
    home.chmod(0o500)
    try:
        with pytest.raises(PostUpgradeError, match="Cannot remove update marker"):
            _runner(tmp_path, FakeUnpacker(), io.StringIO()).run(marker)
    finally:
        home.chmod(0o700)


def test_update_marker_parse_and_write(tmp_path):
    marker = UpdateMarker.parse('{"PreviousVersion": "1.30.0", "InstallAddon": true}')
    assert marker == UpdateMarker(previous_version="1.30.0", install_addon=True)

    path = tmp_path / "updatemarker"
    marker.write(path)
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "InstallAddon": True,
        "PreviousVersion": "1.30.0",
    }


def test_update_marker_field_names_ignore_case():
    marker = UpdateMarker.parse(b'{"previousversion": "1.2.0", "INSTALLADDON": true}')
    assert marker == UpdateMarker(previous_version="1.2.0", install_addon=True)
