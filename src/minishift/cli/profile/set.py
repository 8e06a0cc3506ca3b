"""
minishift profile set command.

SUMMARY: Set the active profile

Creates the profile when it does not exist yet. The name was already
picked up before argument parsing, so the profile home exists by now.
"""

from __future__ import annotations

import argparse

from minishift.core.profile import set_active_profile

SUMMARY = "Set the active profile"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("name", help="Profile name (alphanumeric)")


def main(args: argparse.Namespace) -> int:
    ctx = args._context
    set_active_profile(ctx.all_instances, args.name)
    ctx.set_cluster_context(args.name)
    print(f"Profile '{args.name}' set as active profile.")
    return 0
