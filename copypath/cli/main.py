"""Entry point for the copypath CLI."""

from __future__ import annotations

import logging
import sys

from copypath.cli.arg_parser import parse_args
from copypath.cli.log_setup import configure_logging
from copypath.cli.output import print_error, print_output
from copypath.cli.shell import run_shell
from copypath.config.loader import load_config
from copypath.core.errors import ConfigError
from copypath.extension import Extension

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns the process exit code."""
    args = parse_args(argv)

    try:
        config = load_config(path=args.config)
    except ConfigError as e:
        print_error(e.message)
        return 2

    level = logging.DEBUG if args.verbose else config.logging.level
    configure_logging(level, log_file=args.log_file)
    logger.debug("Starting in %s mode", args.mode)

    ext = Extension.from_config(config)

    if args.mode == "shell":
        run_shell(ext, show_content=args.show_content)
        return 0

    output = ext.run(args.name, args.args)
    print_output(output, show_content=args.show_content)
    return 0 if output.ok else 1


def run() -> None:
    """Console script wrapper."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
