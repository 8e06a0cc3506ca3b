"""
minishift profile list command.

SUMMARY: List existing profiles
"""

from __future__ import annotations

import argparse

from minishift.cli import OutputFormatter, add_json_flag
from minishift.core.profile import get_active_profile, list_profiles

SUMMARY = "List existing profiles"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    ctx = args._context
    active = get_active_profile(ctx.all_instances)
    names = list_profiles(ctx.resolver)

    if formatter.json_mode:
        formatter.json_output(
            {"profiles": [{"name": n, "active": n == active} for n in names]}
        )
        return 0

    width = max(len(n) for n in names)
    for n in names:
        marker = "(Active)" if n == active else ""
        formatter.text(f"- {n.ljust(width)}\t{marker}".rstrip())
    return 0
