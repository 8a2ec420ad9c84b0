"""Core ddlkit components.

This module provides the building blocks shared by the generator:
- Error handling and exceptions
- Configuration management
- Logging setup
"""

from .error import DdlKitError, ConfigError
from .logging import init_logging, get_logger
from .config import GeneratorConfig, LogLevel, UnresolvedPolicy

__all__ = [
    # Error handling
    "DdlKitError",
    "ConfigError",
    # Logging
    "init_logging",
    "get_logger",
    # Configuration
    "GeneratorConfig",
    "LogLevel",
    "UnresolvedPolicy",
]
