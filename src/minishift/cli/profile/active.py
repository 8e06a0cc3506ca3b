"""
minishift profile active command.

SUMMARY: Print the active profile
"""

from __future__ import annotations

import argparse

from minishift.core.profile import get_active_profile

SUMMARY = "Print the active profile"


def main(args: argparse.Namespace) -> int:
    print(get_active_profile(args._context.all_instances))
    return 0
