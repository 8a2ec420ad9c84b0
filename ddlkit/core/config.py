"""Configuration management for ddlkit.

This module provides the generator configuration with validation and
default values, plus helpers for reading settings from the environment.
"""

import os
from enum import Enum
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .error import ConfigError


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class UnresolvedPolicy(str, Enum):
    """What a table statement does with a column whose type cannot be rendered."""
    FAIL = "fail"
    SKIP = "skip"


class GeneratorConfig(BaseModel):
    """Settings consulted by the DDL generator and its driver."""

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    dialect: str = Field(default="postgresql", description="Registered dialect name")
    schema_name: Optional[str] = Field(default=None, description="Schema used to qualify object names")
    ddl_column_defaults: bool = Field(default=True, description="Emit column-level DEFAULT clauses")
    quote_all_identifiers: bool = Field(default=False, description="Quote every identifier")
    on_unresolved: UnresolvedPolicy = Field(
        default=UnresolvedPolicy.FAIL,
        description="Fail the table statement or skip the column on unknown types",
    )
    statement_separator: str = Field(default=";\n\n", description="Separator used when serializing scripts")
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Validate and normalize log level."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator('dialect')
    @classmethod
    def validate_dialect(cls, v):
        """Normalize the dialect name."""
        v = v.strip().lower()
        if not v:
            raise ValueError("dialect name cannot be empty")
        return v

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "GeneratorConfig":
        """Create configuration from DDLKIT_* environment variables.

        A ``.env`` file is loaded first when present; variables already set in
        the process environment take precedence.
        """
        load_dotenv(dotenv_path)

        data: Dict[str, Any] = {}
        dialect = get_env_var("DDLKIT_DIALECT")
        if dialect is not None:
            data["dialect"] = dialect
        schema_name = get_env_var("DDLKIT_SCHEMA")
        if schema_name:
            data["schema_name"] = schema_name
        data["ddl_column_defaults"] = get_env_bool("DDLKIT_DDL_COLUMN_DEFAULTS", True)
        data["quote_all_identifiers"] = get_env_bool("DDLKIT_QUOTE_ALL_IDENTIFIERS", False)
        on_unresolved = get_env_var("DDLKIT_ON_UNRESOLVED")
        if on_unresolved is not None:
            data["on_unresolved"] = on_unresolved.lower()
        log_level = get_env_var("DDLKIT_LOG_LEVEL")
        if log_level is not None:
            data["log_level"] = log_level
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratorConfig":
        """Create configuration from dictionary."""
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError.invalid_config(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()


def get_env_var(name: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    """Get environment variable with optional default and required validation.

    Args:
        name: Environment variable name
        default: Default value if not found
        required: Whether the variable is required

    Returns:
        Environment variable value or default

    Raises:
        ConfigError: If required variable is not found
    """
    value = os.getenv(name, default)

    if required and value is None:
        raise ConfigError.missing_env_var(name)

    return value


def get_env_bool(name: str, default: bool = False) -> bool:
    """Get boolean environment variable.

    Args:
        name: Environment variable name
        default: Default value if not found

    Returns:
        Boolean value
    """
    value = os.getenv(name)
    if value is None:
        return default

    return value.lower() in ('true', '1', 'yes', 'on')
