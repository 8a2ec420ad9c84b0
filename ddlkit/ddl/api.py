"""Public API functions for DDL generation."""

from typing import Optional, Set

from ..core.config import GeneratorConfig
from .definitions import Database
from .dialects import get_dialect
from .errors import SchemaDefinitionError
from .generator import DDLGenerator
from .script import SqlScript


def create_generator_for_dialect(dialect: str, config: Optional[GeneratorConfig] = None) -> DDLGenerator:
    """Create a new DDLGenerator for the named dialect.

    Args:
        dialect: Registered dialect name or alias
        config: Optional generator configuration

    Returns:
        A DDLGenerator configured for the dialect

    Raises:
        DialectError: If the dialect is not registered
    """
    profile = get_dialect(dialect)
    if config is None:
        config = GeneratorConfig(dialect=profile.name)
    return DDLGenerator(profile, config)


def validate_database(database: Database) -> None:
    """Validate a database definition for structural mistakes.

    Catches empty or duplicate names and references to columns or tables that
    do not exist. No semantic analysis is done.

    Args:
        database: The database to validate

    Raises:
        SchemaDefinitionError: If the database is invalid
    """
    table_names: Set[str] = set()
    for table in database.tables:
        if not table.name or not table.name.strip():
            raise SchemaDefinitionError("Table name cannot be empty")
        if table.name in table_names:
            raise SchemaDefinitionError(f"Duplicate table name: {table.name}")
        table_names.add(table.name)

        if not table.columns:
            raise SchemaDefinitionError(f"Table {table.name} must have at least one column")

        column_names: Set[str] = set()
        for column in table.columns:
            if not column.name or not column.name.strip():
                raise SchemaDefinitionError(f"Column name cannot be empty in table {table.name}")
            if column.name in column_names:
                raise SchemaDefinitionError(f"Duplicate column name: {column.full_name}")
            column_names.add(column.name)

        for pk_col in table.primary_key:
            if pk_col not in column_names:
                raise SchemaDefinitionError(
                    f"Primary key column '{pk_col}' does not exist in table {table.name}"
                )

        for index in table.indexes:
            if not index.columns:
                raise SchemaDefinitionError(f"Index {index.name} must specify at least one column")
            for idx_col in index.columns:
                if idx_col not in column_names:
                    raise SchemaDefinitionError(
                        f"Index column '{idx_col}' does not exist in table {table.name}"
                    )

    for relation in database.relations:
        if not relation.columns:
            raise SchemaDefinitionError(f"Relation {relation.name} must reference at least one column")
        for table_name, columns in (
            (relation.table, relation.source_columns),
            (relation.references, relation.target_columns),
        ):
            table = database.get_table(table_name)
            if table is None:
                raise SchemaDefinitionError(
                    f"Relation {relation.name} references unknown table {table_name}"
                )
            for column_name in columns:
                if table.get_column(column_name) is None:
                    raise SchemaDefinitionError(
                        f"Relation {relation.name} references unknown column {table_name}.{column_name}"
                    )


def generate_database_script(
    database: Database,
    dialect: str,
    config: Optional[GeneratorConfig] = None,
) -> SqlScript:
    """Generate the complete script creating a database.

    Auxiliary objects required by the dialect come first, then tables with
    their indexes, then foreign keys.

    Raises:
        SchemaDefinitionError: If the database is invalid
        SqlGenerationError: If SQL generation fails
    """
    validate_database(database)
    generator = create_generator_for_dialect(dialect, config)
    script = SqlScript()
    generator.create_database(database, script)
    return script


def generate_drop_script(
    database: Database,
    dialect: str,
    config: Optional[GeneratorConfig] = None,
) -> SqlScript:
    """Generate the script dropping every object of a database."""
    generator = create_generator_for_dialect(dialect, config)
    script = SqlScript()
    generator.drop_database(database, script)
    return script
