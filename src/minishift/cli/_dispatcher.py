"""
Auto-discovery CLI dispatcher for minishift.

Scans subfolders for commands and automatically registers them.
Adding new commands = just add a .py file to the appropriate subfolder.

Every invocation runs in this order:
1. Experimental features switch from the environment
2. Profile selection from the raw argument vector
3. argparse
4. Profile bootstrap (skipped for ``version`` and ``completion``)
5. The command body, which receives the bootstrap context as ``args._context``
"""

from __future__ import annotations

import argparse
import importlib
import os
import sys
from collections.abc import Callable, Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

from minishift.cli._aliases import domain_cli_names, resolve_canonical_domain
from minishift.cli._args import add_global_flags
from minishift.cli._output import print_error
from minishift.core.bootstrap import BootstrapSequence, Collaborators
from minishift.core.config import FlagSet, load_global_flags
from minishift.core.constants import BINARY_NAME
from minishift.core.errors import MinishiftError
from minishift.core.paths import PathResolver, get_minishift_root


def _command_info(module: Any, fallback_summary: str) -> dict[str, Any]:
    return {
        "module": module,
        "summary": getattr(module, "SUMMARY", fallback_summary),
        "register_args": getattr(module, "register_args", None),
        "main": getattr(module, "main", None),
    }


@lru_cache(maxsize=1)
def discover_domains() -> dict[str, Path]:
    """
    Discover all CLI domain subfolders (profile, config).

    Returns:
        Dict mapping domain name to directory path
    """
    cli_dir = Path(__file__).parent
    domains = {}
    for item in cli_dir.iterdir():
        if item.name == "commands":
            continue
        if item.is_dir() and not item.name.startswith("_"):
            # Must have at least one non-init .py file
            has_commands = any(
                f.suffix == ".py" and not f.name.startswith("_")
                for f in item.iterdir()
            )
            if has_commands:
                domains[item.name] = item
    return domains


@lru_cache(maxsize=32)
def discover_root_commands() -> dict[str, dict[str, Any]]:
    """Discover top-level commands under cli/commands (no domain prefix)."""
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    if not commands_dir.exists():
        return commands

    for item in commands_dir.glob("*.py"):
        if item.name.startswith("_"):
            continue
        cmd_name = item.stem
        try:
            module = importlib.import_module(f"minishift.cli.commands.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import command {cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = _command_info(module, cmd_name)

    return commands


@lru_cache(maxsize=32)
def discover_commands(domain: str) -> dict[str, dict[str, Any]]:
    """
    Discover all commands in a domain subfolder.

    Args:
        domain: Name of the domain (e.g., "profile", "config")

    Returns:
        Dict mapping command name to command info dict
    """
    domain_dir = Path(__file__).parent / domain
    commands: dict[str, dict[str, Any]] = {}

    for item in domain_dir.glob("*.py"):
        if item.name.startswith("_"):
            continue
        cmd_name = item.stem
        try:
            module = importlib.import_module(f"minishift.cli.{domain}.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import {domain}.{cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = _command_info(module, f"{domain} {cmd_name}")

    return commands


def build_parser(flags: FlagSet) -> argparse.ArgumentParser:
    """
    Build the argument parser with auto-discovered domains and commands.

    Global flags are registered on every parser so they may appear
    anywhere on the command line.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog=BINARY_NAME,
        description=(
            "Minishift is a command-line tool that provisions and manages "
            "single-node OpenShift clusters optimized for development workflows."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_global_flags(parser, flags)

    subparsers = parser.add_subparsers(
        dest="domain",
        title="commands",
        metavar="<command>",
    )

    # Register top-level commands (no domain prefix)
    for cmd_name, cmd_info in sorted(discover_root_commands().items()):
        cmd_parser = subparsers.add_parser(cmd_name, help=cmd_info["summary"])
        add_global_flags(cmd_parser, flags)
        if cmd_info["register_args"]:
            cmd_info["register_args"](cmd_parser)
        if cmd_info["main"]:
            cmd_parser.set_defaults(_func=cmd_info["main"])

    # Auto-register domains
    for domain_name in sorted(discover_domains().keys()):
        domain_commands = discover_commands(domain_name)
        if not domain_commands:
            continue

        domain_primary, domain_aliases = domain_cli_names(domain_name)
        domain_parser = subparsers.add_parser(
            domain_primary,
            aliases=domain_aliases,
            help=f"{domain_primary.title()} management commands",
        )
        add_global_flags(domain_parser, flags)
        cmd_subparsers = domain_parser.add_subparsers(
            dest="command",
            title="commands",
            description=f"Available {domain_primary} commands",
            metavar="<command>",
        )

        for cmd_name, cmd_info in sorted(domain_commands.items()):
            cmd_parser = cmd_subparsers.add_parser(cmd_name, help=cmd_info["summary"])
            add_global_flags(cmd_parser, flags)
            if cmd_info["register_args"]:
                cmd_info["register_args"](cmd_parser)
            if cmd_info["main"]:
                cmd_parser.set_defaults(_func=cmd_info["main"])

    return parser


def command_path(args: argparse.Namespace) -> tuple[str, ...]:
    """Return the canonical command names selected on ``args``, root first."""
    domain = getattr(args, "domain", None)
    if not domain:
        return ()
    canonical = resolve_canonical_domain(domain, canonical_domains=tuple(discover_domains().keys()))
    path = [canonical or domain]
    command = getattr(args, "command", None)
    if command:
        path.append(command)
    return tuple(path)


def main(
    argv: list[str] | None = None,
    *,
    collaborators: Collaborators | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """
    Main entry point for the minishift CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])
        collaborators: Side-effect hooks handed to the bootstrap
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    env = os.environ if environ is None else environ

    resolver = PathResolver(get_minishift_root(env))
    flags = load_global_flags(log_dir_default=resolver.default_log_dir)
    sequence = BootstrapSequence(flags, resolver=resolver, environ=env, collaborators=collaborators)

    try:
        sequence.process_environment()
        profile = sequence.resolve_profile(argv)
    except MinishiftError as e:
        print_error(str(e))
        return 1

    parser = build_parser(flags)
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse has already printed help or the usage error
        return 0 if e.code in (0, None) else 1
    flags.apply_namespace(args)

    # If no command specified, show help
    if not args.domain:
        parser.print_help()
        return 0

    func: Callable[[argparse.Namespace], int] | None = getattr(args, "_func", None)
    if func is None:
        domain_parser = parser._subparsers._group_actions[0].choices.get(args.domain)
        if domain_parser:
            domain_parser.print_help()
        return 0

    try:
        args._context = sequence.run(profile, command_path(args))
        args._profile = profile
        return func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    except MinishiftError as e:
        print_error(str(e))
        return 1


def cli() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
