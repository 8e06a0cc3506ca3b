"""
minishift config set command.

SUMMARY: Set a configuration property

Values for global flag names are stored with the flag's type so they
round-trip as bool/int; other properties are stored as strings.
"""

from __future__ import annotations

import argparse

from minishift.core.errors import ConfigError
from minishift.core.utils.io import update_json

from ._common import coerce_for_key

SUMMARY = "Set a configuration property"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("key", help="Property name")
    parser.add_argument("value", help="Property value")


def main(args: argparse.Namespace) -> int:
    ctx = args._context
    value = coerce_for_key(ctx.flags, args.key, args.value)

    def _apply(data: dict) -> dict:
        data[args.key] = value
        return data

    try:
        update_json(ctx.paths.config_file, _apply)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Cannot update '{ctx.paths.config_file}': {exc}") from exc
    return 0
