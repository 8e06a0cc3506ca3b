"""Build identity helpers."""
from __future__ import annotations


def get_minishift_version() -> str:
    from minishift import __version__

    return __version__


def get_commit_sha() -> str:
    from minishift import __commit_sha__

    return __commit_sha__


__all__ = ["get_minishift_version", "get_commit_sha"]
