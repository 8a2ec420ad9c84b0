"""Structured logging for ddlkit.

Log records are written to stderr as one JSON object per line. The level is
taken from the ``DDLKIT_LOG_LEVEL`` environment variable unless passed
explicitly.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add extra fields if present
        if hasattr(record, 'extra_fields'):
            log_entry.update(record.extra_fields)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.getenv("DDLKIT_LOG_LEVEL", "INFO")).upper()
    numeric_level = getattr(logging, name, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    return numeric_level


def init_logging(level: Optional[str] = None) -> None:
    """Initialize stderr logging with JSON format.

    Sets up the ``ddlkit`` logger so that it:
    - Writes JSON logs to stderr
    - Respects the DDLKIT_LOG_LEVEL environment variable
    - Does not install duplicate handlers when called more than once

    Args:
        level: Optional level name overriding DDLKIT_LOG_LEVEL
    """
    numeric_level = _resolve_level(level)

    package_logger = logging.getLogger("ddlkit")
    package_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(numeric_level)
    stderr_handler.setFormatter(JSONFormatter())
    package_logger.addHandler(stderr_handler)

    package_logger.debug("ddlkit logging initialized", extra={
        'extra_fields': {
            'log_level': logging.getLevelName(numeric_level),
            'handler': 'stderr',
            'format': 'json'
        }
    })


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``ddlkit`` namespace.

    Args:
        name: Logger name, usually the calling module's ``__name__``

    Returns:
        A logger instance
    """
    if not name.startswith("ddlkit"):
        name = f"ddlkit.{name}"
    return logging.getLogger(name)
