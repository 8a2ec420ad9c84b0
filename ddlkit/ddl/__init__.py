"""Dialect-aware DDL generation.

This package turns a database-independent schema description into DDL
statements for a specific database product.
"""

from .definitions import (
    SYSDATE,
    DataType,
    ReferentialAction,
    TableColumn,
    Index,
    Table,
    Relation,
    Database,
)
from .errors import (
    DdlError,
    SchemaDefinitionError,
    DialectError,
    UnsupportedFeatureError,
    SqlGenerationError,
    UnresolvedTypeError,
    ScriptExecutionError,
)
from .script import SqlScript
from .driver import SqlDriver
from .dialects import (
    DialectProfile,
    register_dialect,
    get_dialect,
    available_dialects,
)
from .generator import DDLAction, DDLGenerator
from .loader import load_database, load_database_file

# Public API functions
from .api import (
    create_generator_for_dialect,
    validate_database,
    generate_database_script,
    generate_drop_script,
)

__all__ = [
    # Schema model
    "SYSDATE",
    "DataType",
    "ReferentialAction",
    "TableColumn",
    "Index",
    "Table",
    "Relation",
    "Database",

    # Errors
    "DdlError",
    "SchemaDefinitionError",
    "DialectError",
    "UnsupportedFeatureError",
    "SqlGenerationError",
    "UnresolvedTypeError",
    "ScriptExecutionError",

    # Core classes
    "SqlScript",
    "SqlDriver",
    "DialectProfile",
    "DDLAction",
    "DDLGenerator",

    # Dialect registry
    "register_dialect",
    "get_dialect",
    "available_dialects",

    # Loading
    "load_database",
    "load_database_file",

    # API functions
    "create_generator_for_dialect",
    "validate_database",
    "generate_database_script",
    "generate_drop_script",
]
