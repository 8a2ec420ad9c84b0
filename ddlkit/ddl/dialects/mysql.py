"""MySQL dialect."""

from typing import Optional

from ..definitions import DataType, TableColumn
from .base import SQL_RESERVED_WORDS, DialectProfile


def render_autoinc(profile: DialectProfile, size: float, column: Optional[TableColumn]) -> str:
    """Native AUTO_INCREMENT on INT or BIGINT."""
    if abs(int(size)) >= 8:
        return "BIGINT AUTO_INCREMENT"
    return "INT AUTO_INCREMENT"


def render_clob(profile: DialectProfile, size: float, column: Optional[TableColumn]) -> str:
    width = abs(int(size))
    if width and width <= 65535:
        return "TEXT"
    elif width and width <= 16777215:
        return "MEDIUMTEXT"
    return "LONGTEXT"


MYSQL = DialectProfile(
    name="mysql",
    type_names={
        DataType.BOOL: "TINYINT(1)",
        DataType.DATETIME: "DATETIME",
        DataType.BLOB: "LONGBLOB",
        DataType.FLOAT: "DOUBLE",
    },
    type_renderers=(
        (DataType.AUTOINC, render_autoinc),
        (DataType.CLOB, render_clob),
    ),
    alter_column_clause="MODIFY",
    drop_constraint_clause="DROP FOREIGN KEY",
    quote_char="`",
    reserved_words=SQL_RESERVED_WORDS | {"DATABASE", "LIMIT", "RANGE", "READ", "SCHEMA", "SHOW"},
)
