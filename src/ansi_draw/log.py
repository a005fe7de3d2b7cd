"""Logging setup. Library modules log under the ``ansi_draw`` namespace."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO


_LOGGER_NAME = "ansi_draw"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(
    level: int | str = logging.WARNING,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Stdout carries the drawing, so log records never go there. Calling
    this again only adjusts the level.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    logger.debug("logging configured at %s", logging.getLevelName(logger.level))
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)
