"""Tests for the logging utilities."""

import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from keymover.utils import logging as km_logging
from keymover.utils.logging import get_console, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the package logger back to its default setup after each test."""
    yield
    setup_logging()


class TestGetLogger:
    """Tests for get_logger."""

    def test_root_package_logger(self):
        """Test the unnamed logger is the package logger."""
        assert get_logger().name == "keymover"

    def test_child_logger(self):
        """Test named loggers are children of the package logger."""
        assert get_logger("mover").name == "keymover.mover"

    def test_module_name_not_doubled(self):
        """Test a dotted module name is not nested twice."""
        assert get_logger("keymover.mover.mover").name == "keymover.mover.mover"

    def test_default_is_quiet(self):
        """Test the default setup does not emit debug or info records."""
        logger = get_logger()
        assert logger.level == logging.WARNING
        assert logger.propagate is False


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_handler(self):
        """Test the console handler is a Rich handler."""
        setup_logging(level="DEBUG")
        handlers = get_logger().handlers

        assert len(handlers) == 1
        assert isinstance(handlers[0], RichHandler)
        assert get_logger().level == logging.DEBUG

    def test_file_handler(self, tmp_path):
        """Test file logging writes to keymover.log."""
        setup_logging(level="INFO", log_dir=tmp_path, console_enabled=False, file_enabled=True)
        get_logger("test").info("hello from the test")

        for handler in get_logger().handlers:
            handler.flush()

        log_file = tmp_path / "keymover.log"
        assert log_file.exists()
        assert "hello from the test" in log_file.read_text(encoding="utf-8")

    def test_no_handlers_enabled(self):
        """Test disabling every output leaves only a NullHandler."""
        setup_logging(console_enabled=False, file_enabled=False)
        handlers = get_logger().handlers

        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)

    def test_invalid_level_falls_back(self):
        """Test an unknown level falls back to WARNING."""
        setup_logging(level="nonsense")
        assert get_logger().level == logging.WARNING

    def test_logger_is_singleton(self):
        """Test the logger wrapper is created once."""
        assert km_logging.KeyMoverLogger() is km_logging.KeyMoverLogger()


def test_get_console():
    """Test the shared Rich console is exposed."""
    assert isinstance(get_console(), Console)
