"""Base dialect profile.

A dialect is described by an immutable :class:`DialectProfile`. The profile
holds a sparse type-name override map, an ordered list of type renderers that
take priority over the default resolution, and the phases a dialect adds
around table creation. Everything a profile leaves unset falls back to the
defaults defined here.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, FrozenSet, Mapping, Optional, Tuple

from ..definitions import DataType, Database, TableColumn

if TYPE_CHECKING:
    from ..generator import DDLGenerator
    from ..script import SqlScript


# Renders the SQL type for a column, or returns None when it cannot
TypeRenderer = Callable[["DialectProfile", float, TableColumn], Optional[str]]

# A step of database-level script assembly
Phase = Callable[["DDLGenerator", Database, "SqlScript"], None]


DEFAULT_TYPE_NAMES: Mapping[DataType, str] = MappingProxyType({
    DataType.DATE: "DATE",
    DataType.TIME: "TIME",
    DataType.DATETIME: "TIMESTAMP",
    DataType.TIMESTAMP: "TIMESTAMP",
    DataType.FLOAT: "FLOAT",
    DataType.BOOL: "BOOLEAN",
    DataType.CLOB: "CLOB",
    DataType.BLOB: "BLOB",
    DataType.UNIQUEID: "CHAR(36)",
})

DEFAULT_VARCHAR_LENGTH = 255

SQL_RESERVED_WORDS: FrozenSet[str] = frozenset({
    "ALL", "ALTER", "AND", "AS", "ASC", "BETWEEN", "BY", "CASE", "CHECK",
    "COLUMN", "CONSTRAINT", "CREATE", "CURRENT_DATE", "CURRENT_TIME",
    "CURRENT_TIMESTAMP", "DEFAULT", "DELETE", "DESC", "DISTINCT", "DROP",
    "ELSE", "END", "EXISTS", "FOREIGN", "FROM", "GRANT", "GROUP", "HAVING",
    "IN", "INDEX", "INSERT", "INTO", "IS", "JOIN", "KEY", "LIKE", "NOT",
    "NULL", "ON", "OR", "ORDER", "PRIMARY", "REFERENCES", "SELECT", "SET",
    "TABLE", "THEN", "TO", "UNION", "UNIQUE", "UPDATE", "USER", "VALUES",
    "WHEN", "WHERE", "WITH",
})


@dataclass(frozen=True)
class DialectProfile:
    """Immutable description of how one database diverges from the defaults.

    Attributes:
        name: Registry key of the dialect
        type_names: Sparse map of data types to literal SQL keywords
        type_renderers: ``(DataType, renderer)`` pairs checked in order before
            the default resolution
        pre_table_phases: Steps run by ``create_database`` before any table
        post_drop_phases: Steps run by ``drop_database`` after all tables
        alter_type_literal: Inserted between column name and type when
            rendering for ALTER COLUMN
        alter_column_clause: Verb used to alter a column, None if unsupported
        drop_constraint_clause: Verb used to drop a foreign key
        alter_constraints: Whether foreign keys can be added to or dropped
            from an existing table
        quote_char: Identifier quote character
        reserved_words: Names that must be quoted
        true_literal: Rendering of a boolean true value
        false_literal: Rendering of a boolean false value
        current_timestamp_sql: Rendering of the SYSDATE default
    """
    name: str
    type_names: Mapping[DataType, str] = field(default_factory=dict)
    type_renderers: Tuple[Tuple[DataType, TypeRenderer], ...] = ()
    pre_table_phases: Tuple[Phase, ...] = ()
    post_drop_phases: Tuple[Phase, ...] = ()
    alter_type_literal: str = " "
    alter_column_clause: Optional[str] = "ALTER COLUMN"
    drop_constraint_clause: str = "DROP CONSTRAINT"
    alter_constraints: bool = True
    quote_char: str = '"'
    reserved_words: FrozenSet[str] = SQL_RESERVED_WORDS
    true_literal: str = "1"
    false_literal: str = "0"
    current_timestamp_sql: str = "CURRENT_TIMESTAMP"

    def __post_init__(self):
        object.__setattr__(self, "type_names", MappingProxyType(dict(self.type_names)))
        object.__setattr__(self, "type_renderers", tuple(self.type_renderers))
        object.__setattr__(self, "pre_table_phases", tuple(self.pre_table_phases))
        object.__setattr__(self, "post_drop_phases", tuple(self.post_drop_phases))
        object.__setattr__(self, "reserved_words", frozenset(w.upper() for w in self.reserved_words))

    def type_keyword(self, data_type: DataType) -> Optional[str]:
        """Keyword for a data type: the override if present, else the default."""
        keyword = self.type_names.get(data_type)
        if keyword is not None:
            return keyword
        return DEFAULT_TYPE_NAMES.get(data_type)


def _integer_keyword(size: float) -> str:
    width = abs(int(size))
    if width == 2:
        return "SMALLINT"
    if width > 4:
        return "BIGINT"
    return "INTEGER"


def _decimal_keyword(size: float) -> str:
    # size is precision.scale, e.g. 10.2
    text = f"{abs(size):.6f}"
    whole, _, fraction = text.partition(".")
    precision = int(whole)
    if precision <= 0:
        return "DECIMAL"
    scale = int(fraction.rstrip("0") or 0)
    return f"DECIMAL({precision},{scale})"


def resolve_default_type(profile: DialectProfile, data_type: DataType, size: float) -> Optional[str]:
    """Default SQL type resolution shared by all dialects.

    A keyword present in the profile's override map is returned verbatim.
    Otherwise sized types are decorated from ``size`` and the rest come from
    :data:`DEFAULT_TYPE_NAMES`. Returns None for types without a rendering.
    """
    override = profile.type_names.get(data_type)
    if override is not None:
        return override

    if data_type in (DataType.INTEGER, DataType.AUTOINC):
        return _integer_keyword(size)
    if data_type == DataType.VARCHAR:
        length = int(abs(size)) or DEFAULT_VARCHAR_LENGTH
        return f"VARCHAR({length})"
    if data_type == DataType.CHAR:
        length = int(abs(size)) or 1
        return f"CHAR({length})"
    if data_type == DataType.DECIMAL:
        return _decimal_keyword(size)
    return DEFAULT_TYPE_NAMES.get(data_type)


STANDARD = DialectProfile(name="standard")
