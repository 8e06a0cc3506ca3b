"""
minishift CLI package.

Commands are discovered from subfolders: top-level commands live in
``commands/``, domain commands in ``profile/`` and ``config/``.

Helpers for building commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
"""
from ._args import add_global_flags, add_json_flag
from ._output import OutputFormatter, print_error

__all__ = [
    # Output formatting
    "OutputFormatter",
    "print_error",
    # Argument helpers
    "add_global_flags",
    "add_json_flag",
]
