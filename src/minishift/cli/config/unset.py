"""
minishift config unset command.

SUMMARY: Clear a configuration property
"""

from __future__ import annotations

import argparse

from minishift.core.errors import ConfigError
from minishift.core.utils.io import update_json

SUMMARY = "Clear a configuration property"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("key", help="Property name")


def main(args: argparse.Namespace) -> int:
    config_file = args._context.paths.config_file

    def _apply(data: dict) -> dict:
        data.pop(args.key, None)
        return data

    try:
        update_json(config_file, _apply)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Cannot update '{config_file}': {exc}") from exc
    return 0
