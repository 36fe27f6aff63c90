"""Centralized Logging Management for the YCLIENTS SDK

Handles log configuration, formatting, and output management for the
``yclients`` logger hierarchy. The SDK never touches the root logger.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "yclients"


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record):
        """Format log record with colors for console output."""
        log_message = super().format(record)
        return f"{self.COLORS.get(record.levelname, '')}{log_message}{self.COLORS['RESET']}"


class LoggingManager:
    """Centralized logging configuration and management."""

    _instance: Optional['LoggingManager'] = None

    def __new__(cls, *args, **kwargs) -> 'LoggingManager':
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, level: str = "INFO", log_to_console: bool = True,
                 file_path: Optional[str] = None):
        """Configure the package logger (only once).

        Args:
            level: Log level name for the package logger
            log_to_console: Whether to attach a colored stdout handler
            file_path: Optional path of a rotating log file
        """
        if self._initialized:
            return

        self._setup_package_logger(level, log_to_console, file_path)
        self._initialized = True

    def configure(self, level: str = "INFO", log_to_console: bool = True,
                  file_path: Optional[str] = None):
        """Replace the handlers and level of the package logger.

        Applies on every call, unlike the constructor.
        """
        self._setup_package_logger(level, log_to_console, file_path)

    def _setup_package_logger(self, level: str, log_to_console: bool,
                              file_path: Optional[str]):
        """Configure the package logger with handlers."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(self._to_level(level))
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()

        if log_to_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_formatter = ColoredFormatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
                datefmt='%H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            package_logger.addHandler(console_handler)

        if file_path:
            log_file = Path(file_path)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            package_logger.addHandler(file_handler)

        if not package_logger.handlers:
            package_logger.addHandler(logging.NullHandler())

    @staticmethod
    def _to_level(level: str) -> int:
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f'Invalid log level: {level}')
        return numeric_level

    def set_log_level(self, level: str):
        """Set the logging level of the package logger.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        logging.getLogger(PACKAGE_LOGGER).setLevel(self._to_level(level))

    @classmethod
    def reset(cls):
        """Forget the configured instance so the next call reconfigures."""
        cls._instance = None
