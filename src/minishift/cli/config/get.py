"""
minishift config get command.

SUMMARY: Get the value of a configuration property

Prints the effective value; unset properties print nothing.
"""

from __future__ import annotations

import argparse

SUMMARY = "Get the value of a configuration property"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("key", help="Property name (e.g. memory)")


def main(args: argparse.Namespace) -> int:
    config = args._context.config
    if config.is_set(args.key):
        print(config.get_string(args.key))
    return 0
