"""Logging configuration for undox.

Library modules only create loggers; handlers are installed by
``setup_logging``, which the command line calls on startup.
"""

import json
import logging
import sys
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel

LOGGER_NAME = "undox"


class LogLevel(str, Enum):
    """Log level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogEntry(BaseModel):
    """Structured log entry.

    Attributes:
        timestamp: Log timestamp
        level: Log level
        message: Log message
        logger: Logger name
        context: Additional context
    """

    timestamp: str
    level: str
    message: str
    logger: str
    context: dict[str, Any] = {}


class StructuredFormatter(logging.Formatter):
    """Formatter emitting one JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record.

        Args:
            record: Log record to format

        Returns:
            JSON string
        """
        log_entry = LogEntry(
            timestamp=datetime.fromtimestamp(record.created).isoformat(),
            level=record.levelname,
            message=record.getMessage(),
            logger=record.name,
            context={
                "function": record.funcName,
                "line": record.lineno,
                "module": record.module,
            },
        )

        if record.exc_info:
            log_entry.context["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry.model_dump(), default=str)


class ColoredFormatter(logging.Formatter):
    """Colored console formatter.

    Uses ANSI color codes for terminal output.
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with colors.

        Args:
            record: Log record to format

        Returns:
            Formatted log string with colors
        """
        level_color = self.COLORS.get(record.levelname, "")
        reset_color = self.COLORS["RESET"]
        level_name = f"{level_color}{record.levelname}{reset_color}"
        return f"[{level_name}] {record.name}: {record.getMessage()}"


def setup_logging(
    level: str | LogLevel = "WARNING",
    format_type: str = "text",
    use_colors: bool = True,
    log_file: str | None = None,
) -> logging.Logger:
    """Set up logging for undox.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Output format ("json", "text")
        use_colors: Whether to use colors in console output
        log_file: Optional file to write logs to

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    level_name = level.value if isinstance(level, LogLevel) else level.upper()
    package_logger.setLevel(getattr(logging, level_name))

    package_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    if format_type == "json":
        console_handler.setFormatter(StructuredFormatter())
    elif use_colors:
        console_handler.setFormatter(ColoredFormatter())
    else:
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredFormatter())
        package_logger.addHandler(file_handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (usually __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
