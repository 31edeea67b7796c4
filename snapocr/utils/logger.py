"""
Logging configuration and utilities.
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config.constants import (
    LOGS_DIR, LOG_FORMAT, LOG_DATE_FORMAT, LOG_FILE_PREFIX, TIMESTAMP_FORMAT
)


class LoggerSetup:
    """Configure and manage application logging."""

    _instance: Optional['LoggerSetup'] = None
    _logger: Optional[logging.Logger] = None
    log_filepath: Optional[Path] = None

    def __new__(cls, logs_dir: Optional[Path] = None) -> 'LoggerSetup':
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, logs_dir: Optional[Path] = None):
        """
        Initialize logger setup.

        Args:
            logs_dir: Directory for log files (defaults to LOGS_DIR)
        """
        if self._logger is None:
            self._setup_logging(Path(logs_dir) if logs_dir else LOGS_DIR)

    def _setup_logging(self, logs_dir: Path) -> None:
        """Set up the logging configuration."""
        handlers = [logging.StreamHandler(sys.stderr)]

        timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
        log_filepath = logs_dir / f"{LOG_FILE_PREFIX}{timestamp}.log"
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            handlers.insert(0, logging.FileHandler(log_filepath, encoding='utf-8'))
            self.log_filepath = log_filepath
        except OSError as e:
            # Run without a log file rather than refusing to start
            print(f"Could not create log file {log_filepath}: {e}", file=sys.stderr)

        logging.basicConfig(
            level=logging.INFO,
            format=LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            handlers=handlers,
        )

        self._logger = logging.getLogger('SnapOCR')
        if self.log_filepath:
            self._logger.debug(f"Logging initialized. Log file: {self.log_filepath}")

    @classmethod
    def get_logger(cls, name: str = 'SnapOCR') -> logging.Logger:
        """
        Get a logger instance.

        Args:
            name: Logger name

        Returns:
            Logger instance
        """
        cls()
        return logging.getLogger(name)

    @classmethod
    def setup_debug_logging(cls, enabled: bool = True) -> None:
        """
        Enable or disable debug logging.

        Args:
            enabled: Whether to enable debug logging
        """
        logger = cls.get_logger()
        if enabled:
            logger.setLevel(logging.DEBUG)
            logger.debug("Debug logging enabled")
        else:
            logger.setLevel(logging.INFO)


def get_logger(name: str = 'SnapOCR') -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return LoggerSetup.get_logger(name)


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An error occurred") -> None:
    """
    Log an exception with traceback.

    Args:
        logger: Logger instance
        exception: Exception to log
        message: Additional context message
    """
    logger.error(f"{message}: {str(exception)}", exc_info=True)
