import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'minishift' and shared test helpers as 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from minishift.core.stdlib_logging import reset_logging_for_tests


@pytest.fixture(autouse=True)
def _isolate_minishift_env(monkeypatch):
    """Every test starts without MINISHIFT_* variables or installed log handlers.

    A developer shell with MINISHIFT_HOME set must never leak into a test.
    """
    for key in list(os.environ):
        if key.startswith("MINISHIFT_"):
            monkeypatch.delenv(key, raising=False)
    reset_logging_for_tests()
    yield
    reset_logging_for_tests()


@pytest.fixture
def minishift_home(tmp_path, monkeypatch):
    """Point MINISHIFT_HOME at an empty directory that does not exist yet."""
    home = tmp_path / "minishift-home"
    monkeypatch.setenv("MINISHIFT_HOME", str(home))
    return home


@pytest.fixture
def resolver(minishift_home):
    from minishift.core.paths import PathResolver

    return PathResolver(minishift_home)
