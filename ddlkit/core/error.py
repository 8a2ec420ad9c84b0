"""Unified error handling for ddlkit.

This module provides the base error type shared by every ddlkit component,
with error chaining and context preservation. Component packages derive
their own, more specific error types from it.
"""

from typing import Optional


class DdlKitError(Exception):
    """Base exception for all ddlkit errors.

    This is the unified error type that encompasses all possible error cases
    in the library, providing meaningful error messages and proper error chaining.
    """

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __repr__(self) -> str:
        if self.cause:
            return f"{self.__class__.__name__}('{self.message}', cause={self.cause!r})"
        return f"{self.__class__.__name__}('{self.message}')"


class ConfigError(DdlKitError):
    """Error that occurs due to configuration issues.

    This error is raised when configuration validation fails, a required
    configuration value is missing, or configuration loading fails.

    Examples:
        ```python
        try:
            config = GeneratorConfig.from_env()
        except Exception as e:
            raise ConfigError("Failed to load configuration", cause=e)
        ```
    """

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"configuration error: {message}", cause)

    @classmethod
    def missing_env_var(cls, var_name: str) -> "ConfigError":
        """Create a ConfigError for a missing environment variable."""
        return cls(f"missing environment variable: {var_name}")

    @classmethod
    def invalid_config(cls, message: str) -> "ConfigError":
        """Create a ConfigError for invalid configuration."""
        return cls(f"invalid configuration: {message}")
