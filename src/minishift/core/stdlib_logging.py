"""Python stdlib logging setup driven by the -v/--alsologtostderr/--log_dir flags."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from minishift.core.constants import LOG_FILENAME
from minishift.core.utils.io import ensure_directory

LIBMACHINE_LOGGER = "minishift.libmachine"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_CONFIGURED_LOG_PATH: Optional[str] = None
_FILE_HANDLER: Optional[logging.Handler] = None
_STDERR_HANDLER: Optional[logging.Handler] = None
_LIBMACHINE_NULL_HANDLER: Optional[logging.Handler] = None
_VERBOSITY: int = 0


def verbosity() -> int:
    return _VERBOSITY


def is_verbose(level: int) -> bool:
    """Whether ``-v`` is at least ``level``."""
    return _VERBOSITY >= level


def _close_quietly(handler: logging.Handler) -> None:
    try:
        handler.close()
    except (OSError, ValueError):
        pass


def configure_logging(*, log_dir: Path, verbosity: int = 0, also_to_stderr: bool = False) -> Path:
    """Send log records to ``<log_dir>/minishift.log`` and optionally stderr.

    Idempotent per-process: the file handler is only replaced when the
    target path changes. Returns the log file path.
    """
    global _CONFIGURED_LOG_PATH, _FILE_HANDLER, _STDERR_HANDLER, _VERBOSITY

    _VERBOSITY = max(int(verbosity), 0)
    level = logging.DEBUG if _VERBOSITY >= 2 else logging.INFO

    ensure_directory(Path(log_dir))
    resolved = str((Path(log_dir) / LOG_FILENAME).resolve())

    root = logging.getLogger()
    root.setLevel(level)

    if _CONFIGURED_LOG_PATH != resolved or _FILE_HANDLER is None:
        if _FILE_HANDLER is not None:
            root.removeHandler(_FILE_HANDLER)
            _close_quietly(_FILE_HANDLER)
        fh = logging.FileHandler(resolved, encoding="utf-8")
        fh.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(fh)
        _FILE_HANDLER = fh
        _CONFIGURED_LOG_PATH = resolved
    _FILE_HANDLER.setLevel(level)

    if also_to_stderr and _STDERR_HANDLER is None:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(sh)
        _STDERR_HANDLER = sh
    elif not also_to_stderr and _STDERR_HANDLER is not None:
        root.removeHandler(_STDERR_HANDLER)
        _STDERR_HANDLER = None
    if _STDERR_HANDLER is not None:
        _STDERR_HANDLER.setLevel(level)

    return Path(resolved)


def configure_libmachine_logging(*, show: bool, debug: bool) -> logging.Logger:
    """Route the machine driver logger.

    Hidden unless ``show``; DEBUG when ``debug``.
    """
    global _LIBMACHINE_NULL_HANDLER

    lm = logging.getLogger(LIBMACHINE_LOGGER)
    lm.setLevel(logging.DEBUG if debug else logging.NOTSET)
    if show:
        lm.propagate = True
        if _LIBMACHINE_NULL_HANDLER is not None:
            lm.removeHandler(_LIBMACHINE_NULL_HANDLER)
            _LIBMACHINE_NULL_HANDLER = None
    else:
        lm.propagate = False
        if _LIBMACHINE_NULL_HANDLER is None:
            _LIBMACHINE_NULL_HANDLER = logging.NullHandler()
            lm.addHandler(_LIBMACHINE_NULL_HANDLER)
    return lm


def reset_logging_for_tests() -> None:
    """Test-only: drop handlers installed by this module."""
    global _CONFIGURED_LOG_PATH, _FILE_HANDLER, _STDERR_HANDLER, _LIBMACHINE_NULL_HANDLER, _VERBOSITY
    root = logging.getLogger()
    for h in (_FILE_HANDLER, _STDERR_HANDLER):
        if h is not None:
            root.removeHandler(h)
            _close_quietly(h)
    lm = logging.getLogger(LIBMACHINE_LOGGER)
    if _LIBMACHINE_NULL_HANDLER is not None:
        lm.removeHandler(_LIBMACHINE_NULL_HANDLER)
    lm.propagate = True
    lm.setLevel(logging.NOTSET)
    root.setLevel(logging.WARNING)
    _CONFIGURED_LOG_PATH = None
    _FILE_HANDLER = None
    _STDERR_HANDLER = None
    _LIBMACHINE_NULL_HANDLER = None
    _VERBOSITY = 0


__all__ = [
    "LIBMACHINE_LOGGER",
    "configure_logging",
    "configure_libmachine_logging",
    "is_verbose",
    "reset_logging_for_tests",
    "verbosity",
]
