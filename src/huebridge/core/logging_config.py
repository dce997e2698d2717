"""Logging setup for applications embedding the library.

The library itself only emits records through module loggers; the package
logger carries a `NullHandler` so nothing is printed unless the host
application opts in, either with its own configuration or with
`setup_logging`.
"""

from __future__ import annotations

import logging
import sys

from huebridge.core.config import AppSettings

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "huebridge"


def setup_logging(level: str | int | None = None, *, settings: AppSettings | None = None) -> logging.Logger:
    """Attach a console handler to the package logger.

    `level` falls back to `AppSettings.log_level`. Calling this twice does
    not stack handlers.
    """

    if level is None:
        level = (settings or AppSettings()).log_level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in logger.handlers:
        if getattr(handler, "_huebridge_console", False):
            handler.setLevel(level)
            return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT, DEFAULT_LOG_DATE_FORMAT))
    handler._huebridge_console = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
