"""Logging setup for the command-line entrypoints.

The interactive explorer owns the terminal, so the package logger stays
silent unless a log file is requested.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import LstrError

LOGGER_NAME = "lstr"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def level_for_verbosity(verbosity: int) -> int:
    """Map ``-v`` repetitions to a logging level."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(
    verbosity: int = 0,
    log_file: Path | None = None,
    *,
    allow_stderr: bool = False,
) -> logging.Logger:
    """Attach handlers to the ``lstr`` logger and return it.

    ``log_file`` wins over stderr. Without either, a ``NullHandler`` keeps
    records away from ``logging.lastResort`` so they never reach the
    alternate screen.

    Raises ``LstrError`` when ``log_file`` cannot be opened.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.setLevel(level_for_verbosity(verbosity))
    logger.propagate = False

    handler: logging.Handler
    if log_file is not None:
        try:
            handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            raise LstrError(f"Cannot open log file '{log_file}': {exc}") from exc
    elif allow_stderr:
        handler = logging.StreamHandler()
    else:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
