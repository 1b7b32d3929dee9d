"""Command-line interface."""

from copypath.cli.main import main, run

__all__ = ["main", "run"]
