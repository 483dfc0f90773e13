"""Command-line entry point."""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence

from righthook import commands, logger


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the righthook command."""
    parser = argparse.ArgumentParser(
        prog="righthook", description="A Git hooks manager, an alternative to lefthook"
    )
    parser.add_argument("--version", action="version", version=f"righthook {commands.VERSION}")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Runs the specified hook")
    run_parser.add_argument("hook", help="Hook name")

    install_parser = subparsers.add_parser("install", help="Install Git hooks")
    install_parser.add_argument(
        "-f", "--force", action="store_true", help="Overwrite existing hooks"
    )

    subparsers.add_parser("uninstall", help="Uninstall righthook hooks")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    log = logger.init()
    args = build_parser().parse_args(argv)

    if args.command is None:
        print("No command provided. Use --help for more information.")
        return 0

    try:
        if args.command == "run":
            asyncio.run(commands.run(args.hook))
        elif args.command == "install":
            commands.install(args.force)
        else:
            commands.uninstall()
    except Exception as err:
        log.error("%s", err)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())