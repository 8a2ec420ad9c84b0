"""PostgreSQL dialect.

PostgreSQL has no native auto-increment column attribute; AUTOINC columns
render as SERIAL or BIGSERIAL and a named sequence is created for each of
them before any table.
"""

from typing import TYPE_CHECKING, List, Optional

from ..definitions import DataType, Database, TableColumn
from .base import SQL_RESERVED_WORDS, DialectProfile

if TYPE_CHECKING:
    from ..generator import DDLGenerator
    from ..script import SqlScript


def render_autoinc(profile: DialectProfile, size: float, column: Optional[TableColumn]) -> str:
    """SERIAL for up to 4 bytes, BIGSERIAL from 8 bytes; the sign of size is ignored."""
    if abs(int(size)) >= 8:
        return "BIGSERIAL"
    return "SERIAL"


def render_float(profile: DialectProfile, size: float, column: Optional[TableColumn]) -> str:
    # only double precision, whatever the requested size
    return "DOUBLE PRECISION"


def render_blob(profile: DialectProfile, size: float, column: Optional[TableColumn]) -> Optional[str]:
    return profile.type_keyword(DataType.BLOB)


def create_sequence(generator: "DDLGenerator", column: TableColumn, script: "SqlScript") -> None:
    """Append the CREATE SEQUENCE statement backing an AUTOINC column.

    The sequence is not referenced from the column's DEFAULT.
    """
    seq_name = column.effective_sequence_name
    sql: List[str] = ["-- creating sequence for column ", column.full_name, " --\r\n", "CREATE SEQUENCE "]
    generator.driver.append_qualified_name(sql, seq_name)
    sql.append(" INCREMENT BY 1 START WITH 1 MINVALUE 0")
    script.add_stmt(sql)


def emit_sequences(generator: "DDLGenerator", database: Database, script: "SqlScript") -> None:
    """Create one sequence per AUTOINC column, in table then column order.

    Calling this twice for the same database appends the statements twice.
    """
    for table in database.tables:
        for column in table.columns:
            if column.data_type == DataType.AUTOINC:
                create_sequence(generator, column, script)


def drop_sequences(generator: "DDLGenerator", database: Database, script: "SqlScript") -> None:
    for table in database.tables:
        for column in table.auto_increment_columns:
            sql: List[str] = ["DROP SEQUENCE "]
            generator.driver.append_qualified_name(sql, column.effective_sequence_name)
            script.add_stmt(sql)


POSTGRESQL = DialectProfile(
    name="postgresql",
    type_names={
        DataType.BOOL: "BOOLEAN",
        DataType.CLOB: "TEXT",
        DataType.BLOB: "BYTEA",
        DataType.UNIQUEID: "UUID",
    },
    type_renderers=(
        (DataType.AUTOINC, render_autoinc),
        (DataType.FLOAT, render_float),
        (DataType.BLOB, render_blob),
    ),
    pre_table_phases=(emit_sequences,),
    post_drop_phases=(drop_sequences,),
    alter_type_literal=" TYPE ",
    reserved_words=SQL_RESERVED_WORDS | {"ANALYSE", "ANALYZE", "LIMIT", "OFFSET", "RETURNING"},
    true_literal="TRUE",
    false_literal="FALSE",
)
