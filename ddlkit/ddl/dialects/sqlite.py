"""SQLite dialect."""

from typing import Optional

from ..definitions import DataType, TableColumn
from .base import DialectProfile


def render_autoinc(profile: DialectProfile, size: float, column: Optional[TableColumn]) -> str:
    # INTEGER primary keys alias the rowid, which SQLite assigns itself
    return "INTEGER"


SQLITE = DialectProfile(
    name="sqlite",
    type_names={
        DataType.BOOL: "INTEGER",
        DataType.CLOB: "TEXT",
        DataType.FLOAT: "REAL",
        DataType.DATETIME: "DATETIME",
        DataType.UNIQUEID: "TEXT",
    },
    type_renderers=(
        (DataType.AUTOINC, render_autoinc),
    ),
    # SQLite cannot change the definition of an existing column
    alter_column_clause=None,
    alter_constraints=False,
)
