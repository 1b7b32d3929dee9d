"""Logging configuration for the copypath CLI."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "copypath"

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int | str = logging.WARNING, log_file: Path | None = None) -> None:
    """Configure the ``copypath`` namespace logger.

    Logs go to stderr and, when ``log_file`` is given, to a rotating file
    (max 5MB per file, 3 backups). Calling this again replaces the
    previous handlers.

    Args:
        level: Logging level, as an int or a name like ``"INFO"``.
        log_file: Optional file to log to. Parent directories are created.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    for old_handler in list(package_logger.handlers):
        package_logger.removeHandler(old_handler)
        old_handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    package_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(_FORMAT))
        package_logger.addHandler(file_handler)

    # Don't propagate to root logger
    package_logger.propagate = False
