"""DDL generator driven by a dialect profile."""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Union

from ..core.config import GeneratorConfig, UnresolvedPolicy
from ..core.logging import get_logger
from .definitions import DataType, Database, Relation, Table, TableColumn, Index
from .dialects.base import DialectProfile, resolve_default_type
from .driver import SqlDriver
from .errors import SqlGenerationError, UnresolvedTypeError, UnsupportedFeatureError
from .script import SqlScript

logger = get_logger(__name__)


class DDLAction(str, Enum):
    """Kinds of DDL requested through :meth:`DDLGenerator.get_ddl_script`."""
    CREATE = "CREATE"
    ALTER = "ALTER"
    DROP = "DROP"


DDLObject = Union[Database, Table, TableColumn, Relation]


class DDLGenerator:
    """Generates DDL statements for a schema model using a dialect profile.

    The generator runs the dialect-independent algorithm and consults the
    profile at each point where databases diverge: type rendering, the ALTER
    literal, quoting and literal values (through the driver), and the phases
    run before tables are created or after they are dropped.
    """

    def __init__(
        self,
        profile: DialectProfile,
        config: Optional[GeneratorConfig] = None,
        driver: Optional[SqlDriver] = None,
    ):
        """Initialize the generator.

        Args:
            profile: Dialect profile to generate for
            config: Generator configuration
            driver: Driver capabilities, built from profile and config if omitted
        """
        self.profile = profile
        self.config = config or GeneratorConfig(dialect=profile.name)
        self.driver = driver or SqlDriver(profile, self.config)

    # -- type resolution ---------------------------------------------------

    def resolve_type(self, data_type: DataType, size: float, column: Optional[TableColumn] = None) -> Optional[str]:
        """Produce the SQL type fragment for a data type.

        Dialect renderers are consulted first, in the order the profile lists
        them; the first one registered for ``data_type`` decides. All other
        types use the default resolution.

        Returns:
            The SQL type, or None when the type cannot be rendered
        """
        for handled_type, renderer in self.profile.type_renderers:
            if handled_type == data_type:
                return renderer(self.profile, size, column)
        return resolve_default_type(self.profile, data_type, size)

    # -- columns -----------------------------------------------------------

    def render_column(self, column: TableColumn, alter: bool, sql_out: List[str]) -> bool:
        """Render a column clause: name, type, default and nullability.

        Nothing is appended to ``sql_out`` when the column's type cannot be
        rendered.

        Args:
            column: Column to render
            alter: Render for an ALTER COLUMN statement
            sql_out: Fragment list the clause is appended to

        Returns:
            True if the clause was rendered, False if the type is unresolved
        """
        sql: List[str] = []
        self.driver.append_name(sql, column.name)
        sql.append(self.profile.alter_type_literal if alter else " ")

        type_sql = self.resolve_type(column.data_type, column.size, column)
        if type_sql is None:
            return False
        sql.append(type_sql)

        if self.driver.ddl_column_defaults and not column.auto_generated and column.default_value is not None:
            sql.append(" DEFAULT ")
            sql.append(self.driver.value_string(column.default_value, column.data_type))

        if column.required or column.auto_generated:
            sql.append(" NOT NULL")

        sql_out.extend(sql)
        return True

    def _unresolved(self, column: TableColumn) -> None:
        if self.config.on_unresolved == UnresolvedPolicy.SKIP:
            logger.warning(
                "skipping column with unresolved type",
                extra={'extra_fields': {
                    'column': column.full_name,
                    'data_type': column.data_type.value,
                    'dialect': self.profile.name,
                }},
            )
            return
        self._raise_unresolved(column)

    def _raise_unresolved(self, column: TableColumn) -> None:
        raise UnresolvedTypeError(column.full_name, column.data_type.value, self.profile.name)

    def _check_skipped(self, skipped: Dict[str, TableColumn], names: Iterable[str]) -> None:
        for name in names:
            if name in skipped:
                self._raise_unresolved(skipped[name])

    def _table_of(self, column: TableColumn) -> str:
        if not column.table_name:
            raise SqlGenerationError(f"column {column.name} is not bound to a table")
        return column.table_name

    def _append_names(self, sql: List[str], names: Iterable[str]) -> None:
        separator = ""
        for name in names:
            sql.append(separator)
            self.driver.append_name(sql, name)
            separator = ", "

    # -- database ----------------------------------------------------------

    def create_database(self, database: Database, script: SqlScript) -> None:
        """Append the DDL for a whole database.

        The profile's pre-table phases run first, in order. Tables follow in
        declaration order, then the foreign key relations.
        """
        bound = self._bound_to(database)
        if bound is not self:
            return bound.create_database(database, script)
        logger.info("generating database script", extra={'extra_fields': {
            'dialect': self.profile.name,
            'tables': len(database.tables),
            'relations': len(database.relations),
        }})
        start = len(script)

        for phase in self.profile.pre_table_phases:
            phase(self, database, script)

        skipped: Dict[str, Dict[str, TableColumn]] = {}
        for table in database.tables:
            skipped[table.name] = {column.name: column for column in self.create_table(table, script)}

        if self.profile.alter_constraints:
            for relation in database.relations:
                self._check_skipped(skipped.get(relation.table, {}), relation.source_columns)
                self._check_skipped(skipped.get(relation.references, {}), relation.target_columns)
        self._relations_phase(database.relations, self.create_relation, script)

        logger.info("database script generated", extra={'extra_fields': {
            'dialect': self.profile.name,
            'statements': len(script) - start,
        }})

    def drop_database(self, database: Database, script: SqlScript) -> None:
        """Append the DDL dropping a whole database, dependents first."""
        bound = self._bound_to(database)
        if bound is not self:
            return bound.drop_database(database, script)
        self._relations_phase(tuple(reversed(database.relations)), self.drop_relation, script)

        for table in reversed(database.tables):
            self.drop_table(table, script)

        for phase in self.profile.post_drop_phases:
            phase(self, database, script)

    def _bound_to(self, database: Database) -> "DDLGenerator":
        # a schema set in the configuration wins over the database's own
        if self.config.schema_name or not database.schema:
            return self
        config = self.config.model_copy(update={"schema_name": database.schema})
        return DDLGenerator(self.profile, config)

    def _relations_phase(self, relations, emit, script: SqlScript) -> None:
        if not relations:
            return
        if not self.profile.alter_constraints:
            logger.warning("dialect cannot alter foreign keys, relations skipped", extra={'extra_fields': {
                'dialect': self.profile.name,
                'relations': [relation.name for relation in relations],
            }})
            return
        for relation in relations:
            emit(relation, script)

    # -- tables ------------------------------------------------------------

    def create_table(self, table: Table, script: SqlScript) -> List[TableColumn]:
        """Append CREATE TABLE for a table, followed by its indexes.

        Returns:
            The columns left out because their type cannot be rendered

        Raises:
            UnresolvedTypeError: If a column type cannot be rendered and the
                configured policy is to fail, or if a left out column is
                needed by the primary key or an index, or if no column is left
        """
        sql: List[str] = ["-- creating table ", table.name, " --\n", "CREATE TABLE "]
        self.driver.append_qualified_name(sql, table.name)
        sql.append(" (")

        separator = "\n\t"
        skipped: List[TableColumn] = []
        for column in table.columns:
            column_sql: List[str] = []
            if not self.render_column(column, False, column_sql):
                self._unresolved(column)
                skipped.append(column)
                continue
            sql.append(separator)
            sql.extend(column_sql)
            separator = ",\n\t"

        if skipped:
            if len(skipped) == len(table.columns):
                self._raise_unresolved(skipped[0])
            skipped_names = {column.name: column for column in skipped}
            self._check_skipped(skipped_names, table.primary_key)
            for index in table.indexes:
                self._check_skipped(skipped_names, index.columns)

        if table.primary_key:
            sql.append(separator)
            sql.append("PRIMARY KEY (")
            self._append_names(sql, table.primary_key)
            sql.append(")")

        sql.append(")")
        script.add_stmt(sql)

        for index in table.indexes:
            self.create_index(table, index, script)
        return skipped

    def create_index(self, table: Table, index: Index, script: SqlScript) -> None:
        sql: List[str] = ["-- creating index ", index.name, " --\n"]
        sql.append("CREATE UNIQUE INDEX " if index.unique else "CREATE INDEX ")
        self.driver.append_name(sql, index.name)
        sql.append(" ON ")
        self.driver.append_qualified_name(sql, table.name)
        sql.append(" (")
        self._append_names(sql, index.columns)
        sql.append(")")
        script.add_stmt(sql)

    def drop_table(self, table: Table, script: SqlScript) -> None:
        sql: List[str] = ["DROP TABLE "]
        self.driver.append_qualified_name(sql, table.name)
        script.add_stmt(sql)

    # -- relations ---------------------------------------------------------

    def _check_alter_constraints(self) -> None:
        if not self.profile.alter_constraints:
            raise UnsupportedFeatureError(f"dialect {self.profile.name} cannot alter foreign keys")

    def create_relation(self, relation: Relation, script: SqlScript) -> None:
        """Append ALTER TABLE ... ADD CONSTRAINT ... FOREIGN KEY for a relation."""
        self._check_alter_constraints()
        sql: List[str] = ["-- creating foreign key constraint ", relation.name, " --\n", "ALTER TABLE "]
        self.driver.append_qualified_name(sql, relation.table)
        sql.append(" ADD CONSTRAINT ")
        self.driver.append_name(sql, relation.name)
        sql.append(" FOREIGN KEY (")
        self._append_names(sql, relation.source_columns)
        sql.append(") REFERENCES ")
        self.driver.append_qualified_name(sql, relation.references)
        sql.append(" (")
        self._append_names(sql, relation.target_columns)
        sql.append(")")
        if relation.on_delete is not None:
            sql.append(" ON DELETE ")
            sql.append(relation.on_delete.value)
        script.add_stmt(sql)

    def drop_relation(self, relation: Relation, script: SqlScript) -> None:
        self._check_alter_constraints()
        sql: List[str] = ["ALTER TABLE "]
        self.driver.append_qualified_name(sql, relation.table)
        sql.append(" ")
        sql.append(self.profile.drop_constraint_clause)
        sql.append(" ")
        self.driver.append_name(sql, relation.name)
        script.add_stmt(sql)

    # -- single columns ----------------------------------------------------

    def add_column(self, column: TableColumn, script: SqlScript) -> None:
        """Append ALTER TABLE ... ADD for a column of an existing table."""
        sql: List[str] = ["ALTER TABLE "]
        self.driver.append_qualified_name(sql, self._table_of(column))
        sql.append(" ADD ")
        if not self.render_column(column, False, sql):
            self._unresolved(column)
            return
        script.add_stmt(sql)

    def alter_column(self, column: TableColumn, script: SqlScript) -> None:
        """Append ALTER TABLE ... ALTER COLUMN changing a column's definition.

        Raises:
            UnsupportedFeatureError: If the dialect cannot alter columns
        """
        if self.profile.alter_column_clause is None:
            raise UnsupportedFeatureError(f"dialect {self.profile.name} cannot alter columns")
        sql: List[str] = ["ALTER TABLE "]
        self.driver.append_qualified_name(sql, self._table_of(column))
        sql.append(" ")
        sql.append(self.profile.alter_column_clause)
        sql.append(" ")
        if not self.render_column(column, True, sql):
            self._unresolved(column)
            return
        script.add_stmt(sql)

    def drop_column(self, column: TableColumn, script: SqlScript) -> None:
        sql: List[str] = ["ALTER TABLE "]
        self.driver.append_qualified_name(sql, self._table_of(column))
        sql.append(" DROP COLUMN ")
        self.driver.append_name(sql, column.name)
        script.add_stmt(sql)

    # -- dispatch ----------------------------------------------------------

    def get_ddl_script(self, action: DDLAction, obj: DDLObject, script: SqlScript) -> None:
        """Append the DDL for one action on one schema object.

        Raises:
            UnsupportedFeatureError: If the action is not available for the object
        """
        action = DDLAction(action)
        if isinstance(obj, Database):
            if action == DDLAction.CREATE:
                return self.create_database(obj, script)
            if action == DDLAction.DROP:
                return self.drop_database(obj, script)
        elif isinstance(obj, Table):
            if action == DDLAction.CREATE:
                self.create_table(obj, script)
                return None
            if action == DDLAction.DROP:
                return self.drop_table(obj, script)
        elif isinstance(obj, TableColumn):
            if action == DDLAction.CREATE:
                return self.add_column(obj, script)
            if action == DDLAction.ALTER:
                return self.alter_column(obj, script)
            return self.drop_column(obj, script)
        elif isinstance(obj, Relation):
            if action == DDLAction.CREATE:
                return self.create_relation(obj, script)
            if action == DDLAction.DROP:
                return self.drop_relation(obj, script)
        else:
            raise UnsupportedFeatureError(f"no DDL for object of type {type(obj).__name__}")
        raise UnsupportedFeatureError(f"{action.value} is not supported for {type(obj).__name__}")
