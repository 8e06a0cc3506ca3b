"""JSON I/O utilities with atomic writes."""
from __future__ import annotations

import fcntl
import json
from pathlib import Path
from typing import Any, Callable, Dict

from .core import atomic_write

DEFAULT_JSON_CONFIG: Dict[str, Any] = {
    "indent": 2,
    "sort_keys": True,
    "ensure_ascii": False,
    "encoding": "utf-8",
}


def _cfg() -> Dict[str, Any]:
    return DEFAULT_JSON_CONFIG


def _json_writer(data: Any, cfg: Dict[str, Any]) -> Callable[[Any], None]:
    def _writer(f):
        json.dump(
            data,
            f,
            indent=cfg["indent"],
            sort_keys=cfg["sort_keys"],
            ensure_ascii=cfg["ensure_ascii"],
        )
        f.write("\n")

    return _writer


_MISSING = object()  # Sentinel for unset default


def read_json(file_path: Path | str, *, default: Any = _MISSING) -> Any:
    """Read JSON with a shared lock.

    Args:
        file_path: Path to JSON file
        default: Value to return if file doesn't exist (optional).
                 If not provided, FileNotFoundError is raised.

    Returns:
        Parsed JSON data, or ``default`` if file doesn't exist

    Raises:
        FileNotFoundError: If the file does not exist and no default is provided
        json.JSONDecodeError: If the file content is not valid JSON
    """
    path = Path(file_path)
    cfg = _cfg()
    if not path.exists():
        if default is not _MISSING:
            return default
        raise FileNotFoundError(f"JSON file not found: {path}")

    with open(path, "r", encoding=cfg["encoding"]) as f:
        fcntl.flock(f.fileno(), fcntl.LOCK_SH)
        data = json.load(f)
        fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    return data


def write_json_atomic(
    file_path: Path | str,
    data: Any,
    *,
    indent: int | None = None,
    sort_keys: bool | None = None,
) -> None:
    """Atomically write JSON to ``file_path``.

    Args:
        file_path: Target file path
        data: Data to serialize as JSON
        indent: JSON indentation (default: 2)
        sort_keys: Sort object keys (default: True)
    """
    path = Path(file_path)
    cfg = _cfg().copy()

    if indent is not None:
        cfg["indent"] = indent
    if sort_keys is not None:
        cfg["sort_keys"] = sort_keys

    atomic_write(path, _json_writer(data, cfg), encoding=cfg["encoding"])


def update_json(
    file_path: Path | str,
    update_fn: Callable[[Dict[str, Any]], Dict[str, Any] | None],
) -> Dict[str, Any]:
    """Read-modify-write helper with atomic replacement.

    Args:
        file_path: Path to JSON file (a missing file starts as ``{}``)
        update_fn: Receives the current object and returns the updated one.
                   If it returns None, the (mutated) current object is written.

    Returns:
        The object that was written.
    """
    path = Path(file_path)
    current_obj = read_json(path, default={})
    if not isinstance(current_obj, dict):
        raise ValueError(f"Expected a JSON object in {path}, got {type(current_obj).__name__}")
    current: Dict[str, Any] = dict(current_obj)

    updated = update_fn(current)
    if updated is None:
        updated = current

    write_json_atomic(path, updated)
    return updated


__all__ = [
    "DEFAULT_JSON_CONFIG",
    "read_json",
    "write_json_atomic",
    "update_json",
]
