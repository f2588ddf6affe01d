"""Logging setup for the diagnostics stream.

Diagnostics go to stderr through the ``zebrals`` logger so the report on
stdout stays clean.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "zebrals"
LOG_FORMAT = "%(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def configure_logging(debug: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single stderr handler to the ``zebrals`` logger.

    Repeated calls replace the previous handler instead of stacking.
    """
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    if debug:
        _handler.setFormatter(logging.Formatter(DEBUG_LOG_FORMAT, datefmt=DATE_FORMAT))
    else:
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return logger


__all__ = ["LOGGER_NAME", "configure_logging"]
