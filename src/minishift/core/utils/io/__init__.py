"""I/O utilities for minishift.

This package provides safe, atomic file operations:
- Core: atomic writes, directory management, text I/O
- JSON: read/write helpers
"""
from __future__ import annotations

from .core import (
    DEFAULT_DIR_MODE,
    PathLike,
    atomic_write,
    ensure_directory,
    ensure_parent_dir,
    read_text,
    write_text,
)
from .json import (
    read_json,
    update_json,
    write_json_atomic,
)

__all__ = [
    # core
    "PathLike",
    "DEFAULT_DIR_MODE",
    "ensure_parent_dir",
    "ensure_directory",
    "atomic_write",
    "read_text",
    "write_text",
    # json
    "read_json",
    "write_json_atomic",
    "update_json",
]
