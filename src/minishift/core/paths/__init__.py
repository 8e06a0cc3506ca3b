"""Path utilities for minishift.

- Resolver: minishift root, per-profile home and derived file paths
- InstanceDirs: the fixed directory set of a profile
"""
from __future__ import annotations

from .resolver import (
    InstanceDirs,
    PathResolver,
    ProfilePaths,
    get_minishift_root,
)

__all__ = [
    "InstanceDirs",
    "PathResolver",
    "ProfilePaths",
    "get_minishift_root",
]
