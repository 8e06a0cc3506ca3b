"""
minishift version command.

SUMMARY: Print the version of minishift

Runs without bootstrapping a profile, so it never creates the minishift home.
"""

from __future__ import annotations

import argparse

from minishift.cli import OutputFormatter, add_json_flag
from minishift.core.version import get_commit_sha, get_minishift_version

SUMMARY = "Print the version of minishift"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    version = get_minishift_version()
    sha = get_commit_sha()
    formatter.success(
        {"version": version, "commit": sha},
        f"minishift v{version}+{sha}",
    )
    return 0
