"""
minishift start command.

SUMMARY: Prepare and activate a profile

``start`` is one of the commands allowed to name a profile that does not
exist yet: by the time the body runs the profile home has been laid out.
The body marks the profile active and points the ``oc`` client at it.
"""

from __future__ import annotations

import argparse

from minishift.cli import OutputFormatter, add_json_flag
from minishift.core.profile import set_active_profile

SUMMARY = "Prepare and activate a profile"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    ctx = args._context
    name = ctx.profile_name

    set_active_profile(ctx.all_instances, name)
    ctx.set_cluster_context(name)

    formatter.success(
        {
            "profile": name,
            "home": str(ctx.paths.home_dir),
            "addonsInstalled": ctx.addons_installed,
        },
        f"-- Starting profile '{name}'\n"
        f"   Profile home prepared at {ctx.paths.home_dir}",
    )
    return 0
