import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from loguru import logger
from PySide6.QtWidgets import QApplication

from controlbinding.binding.registry import ContextRegistry


@pytest.fixture(scope="session")
def qapp():
    """Ensure a QApplication exists for widget tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def registry():
    """Fresh context registry so tests do not share process-wide state."""
    return ContextRegistry()


@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
