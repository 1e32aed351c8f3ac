"""Logging infrastructure with Rich console output and optional rotating file logs."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

KEYMOVER_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red bold",
        "critical": "red bold reverse",
        "highlight": "magenta",
    }
)


class KeyMoverLogger:
    """Package logger with Rich console and file output."""

    _instance: Optional["KeyMoverLogger"] = None
    _initialized: bool = False

    def __new__(cls):
        """Singleton pattern to ensure only one logger instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize logger (only once)."""
        if not self._initialized:
            self.console = Console(theme=KEYMOVER_THEME, stderr=True)
            self.logger = logging.getLogger("keymover")
            self._initialized = True

    def setup(
        self,
        level: str = "WARNING",
        log_dir: Optional[Path] = None,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        console_enabled: bool = True,
        file_enabled: bool = False,
    ):
        """
        Configure logging handlers and formatters.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files
            max_bytes: Maximum size of each log file before rotation
            backup_count: Number of rotated log files to keep
            console_enabled: Enable console (Rich) logging
            file_enabled: Enable file logging
        """
        self.logger.handlers.clear()

        log_level = getattr(logging, level.upper(), logging.WARNING)
        self.logger.setLevel(log_level)
        self.logger.propagate = False

        if console_enabled:
            console_handler = RichHandler(
                console=self.console,
                rich_tracebacks=True,
                show_time=True,
                show_path=True,
                markup=False,
            )
            console_handler.setLevel(log_level)
            self.logger.addHandler(console_handler)

        if file_enabled:
            log_dir = Path(log_dir) if log_dir is not None else Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                log_dir / "keymover.log",
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(
                logging.Formatter(
                    fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            file_handler.setLevel(log_level)
            self.logger.addHandler(file_handler)

        # Nothing enabled: keep records away from the root logger's lastResort handler
        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        """Get the package logger, or a child of it when a name is given."""
        if name:
            if name.startswith("keymover."):
                name = name[len("keymover.") :]
            return self.logger.getChild(name)
        return self.logger


_logger_instance: Optional[KeyMoverLogger] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Optional logger name for component-specific logging

    Returns:
        Configured logger instance
    """
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = KeyMoverLogger()
        _logger_instance.setup()
    return _logger_instance.get_logger(name)


def setup_logging(
    level: str = "WARNING",
    log_dir: Optional[Path] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    console_enabled: bool = True,
    file_enabled: bool = False,
):
    """
    Configure global logging settings.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files
        max_bytes: Maximum size of each log file before rotation
        backup_count: Number of rotated log files to keep
        console_enabled: Enable console (Rich) logging
        file_enabled: Enable file logging
    """
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = KeyMoverLogger()
    _logger_instance.setup(level, log_dir, max_bytes, backup_count, console_enabled, file_enabled)


def get_console() -> Console:
    """Get the Rich console instance used by the console handler."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = KeyMoverLogger()
    return _logger_instance.console
