"""Output formatting for CLI commands."""
from __future__ import annotations

import json
import sys
from typing import Any, Dict


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON; otherwise output text
            indent: JSON indentation level
        """
        self.json_mode = json_mode
        self.indent = indent

    def success(self, data: Dict[str, Any], message: str) -> None:
        """Output success result.

        Args:
            data: Result data dictionary
            message: Human-readable success message (used in text mode)
        """
        if self.json_mode:
            output = {"status": "success", **data}
            print(json.dumps(output, indent=self.indent, default=str))
        else:
            print(message)

    def json_output(self, data: Any) -> None:
        print(json.dumps(data, indent=self.indent, default=str))

    def text(self, message: str) -> None:
        print(message)


def print_error(message: str) -> None:
    """Print error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)


__all__ = [
    "OutputFormatter",
    "print_error",
]
