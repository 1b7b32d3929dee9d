"""Argument parsing for the copypath CLI."""

import argparse
from pathlib import Path

from copypath.commands.requests import COMMAND_NAMES


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with ``run`` and ``shell`` subcommands."""
    parser = argparse.ArgumentParser(
        prog="copypath",
        description="Copy file paths with their contents and organize files into folders",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Config file to use instead of the layered ~/.copypath and ./.copypath configs",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file",
    )

    subparsers = parser.add_subparsers(dest="mode", required=True)

    run_parser = subparsers.add_parser(
        "run",
        help="Run a single command",
        description=f"Commands: {', '.join(COMMAND_NAMES)}",
        epilog="Use -- to pass arguments that start with '-', e.g. "
        "copypath run copy_path_with_content f.py -- -x. Anything after -- "
        "is an argument, so put --show-content before it.",
    )
    run_parser.add_argument("name", metavar="COMMAND")
    run_parser.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help="Command arguments; everything after -- is taken literally",
    )
    run_parser.add_argument(
        "--show-content",
        action="store_true",
        help="Print the copied text after the result message",
    )

    shell_parser = subparsers.add_parser(
        "shell",
        help="Start an interactive session that keeps clipboard and folders between commands",
    )
    shell_parser.add_argument(
        "--show-content",
        action="store_true",
        help="Print the copied text after each copy command",
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)
