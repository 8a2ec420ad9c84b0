"""Schema model definitions for DDL generation.

This module defines the database-independent description that the generator
reads: abstract data types, columns, tables, indexes, relations and the
database that owns them. All objects are immutable once built.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Tuple


class DataType(str, Enum):
    """Database-independent column data types."""
    UNKNOWN = "UNKNOWN"
    INTEGER = "INTEGER"
    AUTOINC = "AUTOINC"
    VARCHAR = "VARCHAR"
    CHAR = "CHAR"
    DATE = "DATE"
    TIME = "TIME"
    DATETIME = "DATETIME"
    TIMESTAMP = "TIMESTAMP"
    FLOAT = "FLOAT"
    DECIMAL = "DECIMAL"
    BOOL = "BOOL"
    CLOB = "CLOB"
    BLOB = "BLOB"
    UNIQUEID = "UNIQUEID"


class ReferentialAction(str, Enum):
    """Actions to take on foreign key references."""
    NO_ACTION = "NO ACTION"
    RESTRICT = "RESTRICT"
    CASCADE = "CASCADE"
    SET_NULL = "SET NULL"
    SET_DEFAULT = "SET DEFAULT"


class _SysDate:
    """Default value marker for the database's current timestamp."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SYSDATE"


SYSDATE = _SysDate()


@dataclass(frozen=True)
class TableColumn:
    """Column definition for a database table.

    ``size`` carries the byte width for INTEGER and AUTOINC, the length for
    VARCHAR and CHAR, and ``precision.scale`` for DECIMAL (``10.2``).
    ``auto_generated`` defaults to True for AUTOINC columns.
    """
    name: str
    data_type: DataType
    size: float = 0
    required: bool = False
    auto_generated: Optional[bool] = None
    default_value: Any = None
    sequence_name: Optional[str] = None
    table_name: Optional[str] = None

    def __post_init__(self):
        if self.auto_generated is None:
            object.__setattr__(self, "auto_generated", self.data_type == DataType.AUTOINC)

    @property
    def full_name(self) -> str:
        """Column name qualified by its table name."""
        if self.table_name:
            return f"{self.table_name}.{self.name}"
        return self.name

    @property
    def effective_sequence_name(self) -> str:
        """Name of the sequence backing this column."""
        if self.sequence_name:
            return self.sequence_name
        if self.table_name:
            return f"{self.table_name}_{self.name}_SEQ"
        return f"{self.name}_SEQ"


@dataclass(frozen=True)
class Index:
    """Index definition for a database table."""
    name: str
    columns: Tuple[str, ...]
    unique: bool = False

    def __post_init__(self):
        object.__setattr__(self, "columns", tuple(self.columns))


@dataclass(frozen=True)
class Table:
    """Table definition: an ordered collection of columns."""
    name: str
    columns: Tuple[TableColumn, ...] = ()
    primary_key: Tuple[str, ...] = ()
    indexes: Tuple[Index, ...] = ()

    def __post_init__(self):
        # Columns are bound to this table so they can derive qualified names
        object.__setattr__(
            self,
            "columns",
            tuple(replace(column, table_name=self.name) for column in self.columns),
        )
        object.__setattr__(self, "primary_key", tuple(self.primary_key))
        object.__setattr__(self, "indexes", tuple(self.indexes))

    def get_column(self, name: str) -> Optional[TableColumn]:
        """Look up a column by name."""
        for column in self.columns:
            if column.name == name:
                return column
        return None

    @property
    def auto_increment_columns(self) -> Tuple[TableColumn, ...]:
        return tuple(c for c in self.columns if c.data_type == DataType.AUTOINC)


@dataclass(frozen=True)
class Relation:
    """Foreign key relation from ``table`` to ``references``.

    ``columns`` pairs each source column with the referenced column.
    """
    name: str
    table: str
    references: str
    columns: Tuple[Tuple[str, str], ...]
    on_delete: Optional[ReferentialAction] = None

    def __post_init__(self):
        object.__setattr__(self, "columns", tuple(tuple(pair) for pair in self.columns))

    @property
    def source_columns(self) -> Tuple[str, ...]:
        return tuple(source for source, _ in self.columns)

    @property
    def target_columns(self) -> Tuple[str, ...]:
        return tuple(target for _, target in self.columns)


@dataclass(frozen=True)
class Database:
    """A database: owns an ordered collection of tables and relations.

    ``schema`` qualifies object names unless the generator configuration
    names a schema of its own.
    """
    tables: Tuple[Table, ...] = ()
    relations: Tuple[Relation, ...] = ()
    name: Optional[str] = None
    schema: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "tables", tuple(self.tables))
        object.__setattr__(self, "relations", tuple(self.relations))

    def get_table(self, name: str) -> Optional[Table]:
        """Look up a table by name."""
        for table in self.tables:
            if table.name == name:
                return table
        return None
