"""Logging setup for the ngdocmap CLI and service."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "ngdocmap"
CONSOLE_FORMAT = "ngdocmap: %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def console_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Pick the console level for a run.

    ``quiet`` is set when the mapped tree itself is printed to stdout, so only
    warnings reach the terminal next to it. ``verbose`` wins over ``quiet``.
    """
    if verbose:
        return logging.DEBUG
    return logging.WARNING if quiet else logging.INFO


def configure_logging(level: int = logging.INFO, log_file: Path | None = None) -> logging.Logger:
    """Route ngdocmap logs to stderr at ``level`` and, optionally, to a file.

    The file sink always records DEBUG so a configured ``log_file`` keeps the
    per-stage counts even on quiet runs. Earlier handlers are closed and
    replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is None:
        logger.setLevel(level)
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    sink = logging.FileHandler(log_file, encoding="utf-8")
    sink.setLevel(logging.DEBUG)
    sink.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(sink)
    logger.setLevel(logging.DEBUG)
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "console_level", "get_logger"]
