# tests/conftest.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for test imports like `import teleport_nav`.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers configure_logging() attached so streams don't leak between tests."""
    log = logging.getLogger("teleport_nav")
    handlers = list(log.handlers)
    level = log.level
    yield
    for handler in list(log.handlers):
        if handler not in handlers:
            log.removeHandler(handler)
    log.setLevel(level)
