"""
Structured Logging for codegraph-lint

Provides consistent, structured logging across the codebase.
Compatible with JSON logging for CI environments.
"""

import json
import logging
import sys
from typing import Any

# ==============================================================================
# Logger Configuration
# ==============================================================================

ROOT_LOGGER_NAME = "codegraph_lint"


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: int | str = logging.WARNING,
    structured: bool = False,
) -> logging.Logger:
    """Setup logger with optional structured logging.

    Handlers write to stderr so that diagnostics on stdout stay machine-readable.

    Args:
        name: Logger name
        level: Logging level (int or level name)
        structured: Use JSON structured logging

    Returns:
        Configured logger

    Example:
        logger = setup_logger(level=logging.DEBUG)
        logger.info("Config loaded", extra={"entries": 3})
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if structured:
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    # Attributes present on every LogRecord; anything else came in via `extra=`
    _RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in vars(record).items():
            if key not in self._RESERVED:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str | None = None) -> logging.Logger:
    """Get logger instance under the package namespace.

    Args:
        name: Child logger name (defaults to the package root logger)

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


__all__ = [
    "setup_logger",
    "get_logger",
    "StructuredFormatter",
    "ROOT_LOGGER_NAME",
]
