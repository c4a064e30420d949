"""Utility modules for undox."""

from .imports import import_from_path
from .logging import ColoredFormatter, LogEntry, LogLevel, StructuredFormatter, get_logger, setup_logging

__all__ = [
    # Imports
    "import_from_path",
    # Logging
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogEntry",
    "StructuredFormatter",
    "ColoredFormatter",
]
