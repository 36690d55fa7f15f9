"""
Logging utilities for the Fachdatenkatalog tooling
Centralized logging configuration for the library and the migration scripts
"""

import logging
import sys
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _resolve_level(level: Union[str, int, None]) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def build_formatter(fmt: str = "text") -> logging.Formatter:
    """
    Build a log formatter.

    Args:
        fmt: "text" for the human readable line format, "json" for one JSON object per line

    Returns:
        Formatter instance
    """
    if (fmt or "").strip().lower() == "json":
        return jsonlogger.JsonFormatter(JSON_FORMAT)
    return logging.Formatter(TEXT_FORMAT)


def get_logger(name: str, level: Optional[str] = None, fmt: str = "text") -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override
        fmt: Output format ("text" or "json")

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Don't add handlers if already configured
    if logger.handlers:
        return logger

    log_level = _resolve_level(level)
    logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(build_formatter(fmt))
    logger.addHandler(handler)

    # Prevent duplicate logs
    logger.propagate = False

    return logger


def configure_logging(level: str = "INFO", fmt: str = "text") -> None:
    """
    Configure global logging settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Output format ("text" or "json")
    """
    log_level = _resolve_level(level)

    # Set root logger level (works even when handlers exist)
    logging.root.setLevel(log_level)

    # Only add handler if no handlers exist (avoid duplicate handlers)
    if not logging.root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(build_formatter(fmt))
        logging.root.addHandler(handler)


def get_migration_logger(
    name: str = "migration", level: Optional[str] = None, fmt: str = "text"
) -> logging.Logger:
    """Get migration script logger."""
    return get_logger(f"fdk.migration.{name}", level=level, fmt=fmt)
