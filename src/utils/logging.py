# src/utils/logging.py
"""Logging setup with optional JSON output.

Provides:
- JSON-formatted log output for structured logging
- Centralized logger configuration driven by settings
"""

import json
import logging
from typing import Any

from src.config import settings

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Outputs log records as JSON with timestamp, level, logger name,
    message, and the command word when the record carries one.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Args:
            record: Log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        command_word = getattr(record, "command_word", None)
        if command_word:
            log_data["command_word"] = command_word

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance by name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def configure_logging(
    level: int | str | None = None, json_output: bool | None = None
) -> logging.Handler:
    """Configure logging for the application.

    Attaches a StreamHandler to the root logger, using StructuredFormatter
    when JSON output is enabled and a plain text format otherwise.

    Args:
        level: Logging level. Defaults to settings.log_level.
        json_output: Whether to emit JSON lines. Defaults to settings.log_json.

    Returns:
        The handler that was added, so callers can remove it again.
    """
    if level is None:
        level = settings.log_level
    if json_output is None:
        json_output = settings.log_json

    handler = logging.StreamHandler()
    if json_output:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    logging.root.addHandler(handler)
    logging.root.setLevel(level)
    return handler
