"""Error types for DDL generation."""

from typing import Optional

from ..core.error import DdlKitError


class DdlError(DdlKitError):
    """Base exception for DDL generation errors."""
    pass


class SchemaDefinitionError(DdlError):
    """Error in a schema definition or its validation."""
    pass


class DialectError(DdlError):
    """Unknown dialect or conflicting dialect registration."""
    pass


class UnsupportedFeatureError(DdlError):
    """Action not supported for the object or dialect."""
    pass


class SqlGenerationError(DdlError):
    """Error generating SQL statements."""
    pass


class UnresolvedTypeError(SqlGenerationError):
    """A column's data type has no SQL rendering in the active dialect."""

    def __init__(self, column_name: str, data_type: str, dialect: str):
        super().__init__(
            f"cannot render column {column_name}: data type {data_type} is unknown to dialect {dialect}"
        )
        self.column_name = column_name
        self.data_type = data_type
        self.dialect = dialect


class ScriptExecutionError(DdlError):
    """A statement of a script failed while executing against a connection."""

    def __init__(self, index: int, statement: str, cause: Optional[Exception] = None):
        super().__init__(f"statement {index} failed", cause)
        self.index = index
        self.statement = statement
