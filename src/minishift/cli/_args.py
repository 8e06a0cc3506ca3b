"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse

from minishift.core.config import FlagSet


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode.

    Args:
        parser: ArgumentParser to add the flag to
    """
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_global_flags(parser: argparse.ArgumentParser, flags: FlagSet) -> None:
    """Register the global flags on ``parser``.

    Defaults are suppressed so an attribute only appears on the namespace
    when the flag was given; this lets the same flags be registered on
    every subparser without one level resetting another.

    Args:
        parser: ArgumentParser to add the flags to
        flags: Global flag declarations
    """
    for flag in flags:
        names = [f"--{flag.name}"]
        if flag.short:
            names.insert(0, f"-{flag.short}")
        if flag.kind == "bool":
            parser.add_argument(
                *names,
                dest=flag.dest,
                action="store_const",
                const=True,
                default=argparse.SUPPRESS,
                help=flag.help,
            )
        else:
            parser.add_argument(
                *names,
                dest=flag.dest,
                type=int if flag.kind == "int" else str,
                default=argparse.SUPPRESS,
                metavar=flag.name.upper(),
                help=flag.help,
            )


__all__ = ["add_global_flags", "add_json_flag"]
