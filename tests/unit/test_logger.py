# File: tests/unit/test_logger.py
"""
Unit tests for logging setup.
"""

import logging

from dayview.utils.logger import setup_logger


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_creates_console_and_file_handlers(self, tmp_path):
        logger = setup_logger("dayview.test.handlers", level="debug", log_dir=tmp_path)

        console, file_handler = logger.handlers
        assert console.level == logging.DEBUG
        assert isinstance(file_handler, logging.FileHandler)
        assert list(tmp_path.glob("dayview_*.log"))

    def test_no_duplicate_handlers(self, tmp_path):
        first = setup_logger("dayview.test.dupes", log_dir=tmp_path)
        second = setup_logger("dayview.test.dupes", log_dir=tmp_path)

        assert first is second
        assert len(second.handlers) == 2

    def test_unknown_level_name_falls_back_to_info(self, tmp_path):
        logger = setup_logger("dayview.test.level", level="chatty", log_dir=tmp_path)

        assert logger.handlers[0].level == logging.INFO
