from __future__ import annotations

import logging

import pytest

from bbox.logging import shutdown_logging


@pytest.fixture
def isolated_root_logger():
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        yield root
    finally:
        shutdown_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("BBOX_LOG_LEVEL", "LOG_LEVEL", "BBOX_LOG_FORMAT", "BBOX_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
