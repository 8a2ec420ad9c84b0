"""Append-only container for generated DDL statements."""

from typing import Any, Iterator, List, Sequence, Tuple, Union

from ..core.logging import get_logger
from .errors import ScriptExecutionError

logger = get_logger(__name__)


class SqlScript:
    """An ordered, append-only sequence of SQL statements.

    Statements are kept in the order they were added. There is no way to
    remove or reorder a statement once it has been appended.
    """

    def __init__(self) -> None:
        self._statements: List[str] = []

    def add_stmt(self, sql: Union[str, Sequence[str]]) -> None:
        """Append one statement.

        Args:
            sql: Statement text, or a sequence of fragments that are joined
                without separator
        """
        if not isinstance(sql, str):
            sql = "".join(sql)
        self._statements.append(sql)
        logger.debug("statement added", extra={'extra_fields': {'index': len(self._statements) - 1}})

    @property
    def statements(self) -> Tuple[str, ...]:
        return tuple(self._statements)

    def __len__(self) -> int:
        return len(self._statements)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._statements))

    def __getitem__(self, index: int) -> str:
        return self._statements[index]

    def to_text(self, separator: str = ";\n\n") -> str:
        """Serialize the script, terminating every statement with ``separator``."""
        if not self._statements:
            return ""
        return separator.join(self._statements) + separator

    def execute(self, connection: Any) -> int:
        """Execute every statement in order on a DB-API connection.

        No transaction is opened or committed here; that is left to the caller.

        Args:
            connection: Object exposing ``cursor()`` per DB-API 2.0

        Returns:
            Number of statements executed

        Raises:
            ScriptExecutionError: If a statement fails
        """
        cursor = connection.cursor()
        try:
            for index, statement in enumerate(self._statements):
                try:
                    cursor.execute(statement)
                except Exception as e:
                    logger.error(
                        "statement failed",
                        extra={'extra_fields': {'index': index, 'error': str(e)}},
                    )
                    raise ScriptExecutionError(index, statement, e) from e
        finally:
            cursor.close()
        return len(self._statements)

    def __repr__(self) -> str:
        return f"SqlScript(statements={len(self._statements)})"
