"""
minishift config view command.

SUMMARY: Display the effective configuration

Shows every known property after flags, MINISHIFT_* environment
variables, the profile's config file and defaults have been merged.
"""

from __future__ import annotations

import argparse

from minishift.cli import OutputFormatter, add_json_flag

SUMMARY = "Display the effective configuration"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    settings = args._context.config.all_settings()

    if formatter.json_mode:
        formatter.json_output(settings)
        return 0

    for key, value in settings.items():
        formatter.text(f"- {key:<24}: {value}")
    return 0
