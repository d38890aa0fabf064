# src/teleport_nav/logging_config.py
"""
Logging setup for the teleport-path command.

Only the `teleport_nav` package logger is touched, so embedding
applications keep control of the root logger. Library modules create
loggers and never attach handlers themselves.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "teleport_nav"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Attach one stream handler to the package logger and set its level.

    Calling it again only updates the level; the handler is installed once.
    """
    log = logging.getLogger(PACKAGE_LOGGER)
    log.setLevel(level)

    for handler in log.handlers:
        if getattr(handler, "_teleport_nav_handler", False):
            handler.setLevel(level)
            return log

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.setLevel(level)
    handler._teleport_nav_handler = True  # type: ignore[attr-defined]
    log.addHandler(handler)
    return log
