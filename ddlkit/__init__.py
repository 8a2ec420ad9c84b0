"""ddlkit: dialect-aware DDL generation for Python.

Describe tables, columns and relations once, then generate the CREATE and
DROP scripts for PostgreSQL, MySQL, SQLite or the standard SQL profile.
"""

from .core import (
    DdlKitError,
    ConfigError,
    GeneratorConfig,
    LogLevel,
    UnresolvedPolicy,
    init_logging,
    get_logger,
)
from .ddl import (
    SYSDATE,
    DataType,
    ReferentialAction,
    TableColumn,
    Index,
    Table,
    Relation,
    Database,
    DdlError,
    SchemaDefinitionError,
    DialectError,
    UnsupportedFeatureError,
    SqlGenerationError,
    UnresolvedTypeError,
    ScriptExecutionError,
    SqlScript,
    SqlDriver,
    DialectProfile,
    DDLAction,
    DDLGenerator,
    register_dialect,
    get_dialect,
    available_dialects,
    load_database,
    load_database_file,
    create_generator_for_dialect,
    validate_database,
    generate_database_script,
    generate_drop_script,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "DdlKitError",
    "ConfigError",
    "GeneratorConfig",
    "LogLevel",
    "UnresolvedPolicy",
    "init_logging",
    "get_logger",
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
    # Generation
    "SqlScript",
    "SqlDriver",
    "DialectProfile",
    "DDLAction",
    "DDLGenerator",
    "register_dialect",
    "get_dialect",
    "available_dialects",
    "load_database",
    "load_database_file",
    "create_generator_for_dialect",
    "validate_database",
    "generate_database_script",
    "generate_drop_script",
]
