# log.py
# SPDX-License-Identifier: MIT
"""Package-wide logging helpers for textblocks.

A NullHandler is installed on the package logger so that embedding
applications see nothing unless they opt in via :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager

__all__ = [
    "PACKAGE_LOGGER_NAME",
    "get_logger",
    "configure_logging",
    "temp_level",
]

PACKAGE_LOGGER_NAME = "textblocks"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a named logger, defaulting to the package logger."""
    return logging.getLogger(name or PACKAGE_LOGGER_NAME)


def configure_logging(
    *,
    level: int | str = logging.INFO,
    stream = None,
    fmt: str | None = None,
    datefmt: str | None = None,
    propagate: bool | None = None,
    logger_name: str = PACKAGE_LOGGER_NAME,
) -> logging.Logger:
    """Attach a stream handler to a textblocks logger.

    Args:
        level (int | str): Logging level or level name. Defaults to
            logging.INFO.
        stream (IO[str] | None): Target stream; defaults to sys.stderr.
        fmt (str | None): Log format string.
        datefmt (str | None): Date format string for the handler.
        propagate (bool | None): Whether records bubble up to ancestor
            loggers. None keeps propagation on so root handlers (pytest's
            caplog included) still see records.
        logger_name (str): Logger to configure.

    Returns:
        logging.Logger: The configured logger. Repeated calls reuse the
            existing stream handler instead of stacking new ones.
    """
    logger = get_logger(logger_name or PACKAGE_LOGGER_NAME)
    logger.setLevel(_coerce_level(level))
    logger.propagate = True if propagate is None else bool(propagate)

    if stream is None:
        stream = sys.stderr
    if fmt is None:
        fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    has_stream = False
    for handler in logger.handlers:
        if not isinstance(handler, logging.StreamHandler):
            continue
        has_stream = True
        if getattr(getattr(handler, "stream", None), "closed", False):
            handler.stream = stream
    if not has_stream:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
        logger.addHandler(handler)

    return logger


@contextmanager
def temp_level(level: int | str, name: str | None = None):
    """Temporarily set a logger level inside a ``with`` block."""
    logger = get_logger(name or PACKAGE_LOGGER_NAME)
    old = logger.level
    logger.setLevel(_coerce_level(level))
    try:
        yield logger
    finally:
        logger.setLevel(old)
