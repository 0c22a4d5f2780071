"""
Logging Utility for the Task API.

Provides structured logging with appropriate levels and formats.
"""

import logging
import sys
from datetime import datetime, timezone
import json

ROOT_LOGGER_NAME = "app"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach the console handler to the application's root logger.

    Args:
        level: Logging level name (DEBUG, INFO, ...)

    Returns:
        The configured root application logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Prevent adding handlers multiple times
    if not root.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        # The message already is the JSON object, timestamp and level included
        console_handler.setFormatter(
            logging.Formatter('%(message)s')
        )
        root.addHandler(console_handler)

    return root


class StructuredLogger:
    """Structured logger writing one JSON object per message."""

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name, usually the module's __name__
        """
        self.logger = logging.getLogger(name)

    def _log_structured(self, level: int, message: str, **kwargs):
        """
        Log a structured message.

        Args:
            level: Logging level
            message: Log message
            **kwargs: Additional structured data
        """
        if self.logger.isEnabledFor(level):
            log_data = {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "level": logging.getLevelName(level),
                "message": message,
                "service": self.logger.name
            }
            log_data.update(kwargs)

            self.logger.log(level, json.dumps(log_data, default=str))

    def debug(self, message: str, **kwargs):
        """Log debug message."""
        self._log_structured(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message."""
        self._log_structured(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message."""
        self._log_structured(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message."""
        self._log_structured(logging.ERROR, message, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger for the given module.

    Args:
        name: Logger name

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(name)
