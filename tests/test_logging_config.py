# tests/test_logging_config.py

from __future__ import annotations

import io
import logging

from teleport_nav.logging_config import PACKAGE_LOGGER, configure_logging


def _own_handlers(log: logging.Logger) -> list:
    return [h for h in log.handlers if getattr(h, "_teleport_nav_handler", False)]


def test_configures_package_logger_not_root() -> None:
    root_handlers = list(logging.getLogger().handlers)

    log = configure_logging(logging.DEBUG, stream=io.StringIO())

    assert log is logging.getLogger(PACKAGE_LOGGER)
    assert log.level == logging.DEBUG
    assert len(_own_handlers(log)) == 1
    assert logging.getLogger().handlers == root_handlers


def test_second_call_updates_level_without_duplicate_handler() -> None:
    stream = io.StringIO()
    configure_logging(logging.DEBUG, stream=stream)
    log = configure_logging(logging.WARNING, stream=io.StringIO())

    assert len(_own_handlers(log)) == 1
    assert log.level == logging.WARNING

    logging.getLogger("teleport_nav.pathfinder").info("hidden")
    logging.getLogger("teleport_nav.pathfinder").warning("shown")
    assert "hidden" not in stream.getvalue()
    assert "[WARNING] teleport_nav.pathfinder: shown" in stream.getvalue()
