"""Tests for SqlScript."""

import sqlite3

import pytest

from ddlkit.ddl.errors import ScriptExecutionError


class TestSqlScript:
    """Building and serializing scripts."""

    def test_fragments_are_joined(self, script):
        """A fragment sequence becomes one statement."""
        script.add_stmt(["DROP ", "TABLE ", "T"])
        assert list(script) == ["DROP TABLE T"]

    def test_order_is_preserved(self, script):
        """Statements keep insertion order."""
        for name in ("A", "B", "C"):
            script.add_stmt(f"DROP TABLE {name}")
        assert script.statements == ("DROP TABLE A", "DROP TABLE B", "DROP TABLE C")
        assert script[-1] == "DROP TABLE C"
        assert len(script) == 3

    def test_statements_are_a_snapshot(self, script):
        """The statements tuple does not expose the internal list."""
        script.add_stmt("DROP TABLE A")
        statements = script.statements
        script.add_stmt("DROP TABLE B")
        assert statements == ("DROP TABLE A",)

    def test_to_text(self, script):
        """Every statement is terminated by the separator."""
        script.add_stmt("DROP TABLE A")
        script.add_stmt("DROP TABLE B")
        assert script.to_text() == "DROP TABLE A;\n\nDROP TABLE B;\n\n"
        assert script.to_text(";\n") == "DROP TABLE A;\nDROP TABLE B;\n"

    def test_empty_to_text(self, script):
        assert script.to_text() == ""


class TestExecute:
    """Running scripts against DB-API connections."""

    def test_executes_each_statement(self, script, mocker):
        """Statements run one by one on a single cursor, which is closed."""
        connection = mocker.Mock()
        cursor = connection.cursor.return_value
        script.add_stmt("CREATE TABLE A (X INTEGER)")
        script.add_stmt("CREATE TABLE B (Y INTEGER)")

        assert script.execute(connection) == 2
        assert cursor.execute.call_args_list == [
            mocker.call("CREATE TABLE A (X INTEGER)"),
            mocker.call("CREATE TABLE B (Y INTEGER)"),
        ]
        cursor.close.assert_called_once()
        connection.commit.assert_not_called()

    def test_failure_reports_statement(self, script, mocker):
        """A failing statement is wrapped with its index and text."""
        connection = mocker.Mock()
        cursor = connection.cursor.return_value
        cursor.execute.side_effect = [None, RuntimeError("boom")]
        script.add_stmt("CREATE TABLE A (X INTEGER)")
        script.add_stmt("CREATE TABLE A (X INTEGER)")

        with pytest.raises(ScriptExecutionError) as exc_info:
            script.execute(connection)

        assert exc_info.value.index == 1
        assert exc_info.value.statement == "CREATE TABLE A (X INTEGER)"
        assert isinstance(exc_info.value.cause, RuntimeError)
        assert str(exc_info.value) == "statement 1 failed: boom"
        cursor.close.assert_called_once()

    def test_sqlite_round_trip(self, sqlite, shop_database, script):
        """A generated SQLite script creates working tables."""
        sqlite.create_database(shop_database, script)
        connection = sqlite3.connect(":memory:")
        try:
            assert script.execute(connection) == len(script)
            connection.execute("INSERT INTO ORDERS (NOTE) VALUES ('first')")
            connection.execute("INSERT INTO ITEMS (ORDER_ID, PRICE) VALUES (1, 9.5)")
            row = connection.execute("SELECT ID, NOTE, CREATED FROM ORDERS").fetchone()
            assert row[0] == 1
            assert row[1] == "first"
            assert row[2] is not None
            assert connection.execute("SELECT ID FROM ITEMS").fetchone() == (1,)
        finally:
            connection.close()

    def test_sqlite_duplicate_table_fails(self, sqlite, simple_database, script):
        """Running the same CREATE script twice fails on the first statement."""
        sqlite.create_database(simple_database, script)
        connection = sqlite3.connect(":memory:")
        try:
            script.execute(connection)
            with pytest.raises(ScriptExecutionError) as exc_info:
                script.execute(connection)
            assert exc_info.value.index == 0
        finally:
            connection.close()
