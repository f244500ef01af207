"""
Unit tests for logging setup.
"""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from sysfetch_core.log import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Test setup_logging handler configuration."""

    def test_rich_handler_and_level(self, restore_root_logger):
        setup_logging("debug")

        assert restore_root_logger.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in restore_root_logger.handlers)

    def test_log_file_handler(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "sysfetch.log"

        setup_logging("INFO", str(log_file))
        logging.getLogger("sysfetch_core.test").info("gathered")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert "gathered" in log_file.read_text()
