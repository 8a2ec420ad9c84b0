"""Tests for the ddlkit command-line interface."""

import orjson
import pytest

from ddlkit.cli import main

SCHEMA = {
    "tables": [
        {
            "name": "T",
            "columns": [
                {"name": "id", "type": "AUTOINC", "size": 4},
                {"name": "name", "type": "VARCHAR", "size": 50, "required": True},
            ],
        },
    ],
}


@pytest.fixture
def schema_file(tmp_path, clean_env):
    path = tmp_path / "schema.json"
    path.write_bytes(orjson.dumps(SCHEMA))
    return path


class TestGenerate:
    """The generate command."""

    def test_postgres_to_stdout(self, schema_file, capsys):
        """The CREATE script is written to stdout."""
        assert main(["generate", str(schema_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("-- creating sequence for column T.id --\r\nCREATE SEQUENCE T_id_SEQ ")
        assert "CREATE TABLE T (\n\tid SERIAL NOT NULL,\n\tname VARCHAR(50) NOT NULL);\n\n" in out

    def test_dialect_and_output_file(self, schema_file, tmp_path):
        """--dialect and --output select the dialect and destination."""
        output = tmp_path / "out.sql"
        assert main(["generate", str(schema_file), "-d", "mysql", "-o", str(output)]) == 0
        text = output.read_text(encoding="utf-8")
        assert "id INT AUTO_INCREMENT NOT NULL" in text
        assert "SEQUENCE" not in text

    def test_verbose_flag_before_command(self, schema_file, capsys):
        """-v is a global option given ahead of the command."""
        assert main(["-v", "generate", str(schema_file), "-d", "sqlite"]) == 0
        captured = capsys.readouterr()
        assert "CREATE TABLE T (" in captured.out
        assert "\"level\": \"DEBUG\"" in captured.err

    def test_dialect_from_environment(self, schema_file, clean_env, capsys):
        clean_env.setenv("DDLKIT_DIALECT", "sqlite")
        assert main(["generate", str(schema_file)]) == 0
        assert "\tid INTEGER NOT NULL" in capsys.readouterr().out

    def test_drop_with_schema(self, schema_file, capsys):
        assert main(["generate", str(schema_file), "--drop", "--schema", "app"]) == 0
        assert capsys.readouterr().out == "DROP TABLE app.T;\n\nDROP SEQUENCE app.T_id_SEQ;\n\n"

    def test_quote_all(self, schema_file, capsys):
        assert main(["generate", str(schema_file), "--quote-all", "-d", "standard"]) == 0
        assert 'CREATE TABLE "T" (\n\t"id" INTEGER NOT NULL' in capsys.readouterr().out

    def test_unknown_dialect_fails(self, schema_file, capsys):
        assert main(["generate", str(schema_file), "-d", "oracle"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "unsupported dialect: oracle" in captured.err

    def test_missing_schema_file_fails(self, tmp_path, clean_env, capsys):
        assert main(["generate", str(tmp_path / "nope.json")]) == 1
        assert "cannot read schema file" in capsys.readouterr().err

    def test_unresolved_column(self, tmp_path, clean_env, capsys):
        """Unknown types fail unless --skip-unresolved is given."""
        path = tmp_path / "schema.json"
        path.write_bytes(orjson.dumps({"tables": [{"name": "T", "columns": [
            {"name": "A", "type": "INTEGER"},
            {"name": "B", "type": "UNKNOWN"},
        ]}]}))

        assert main(["generate", str(path)]) == 1
        capsys.readouterr()

        assert main(["generate", str(path), "--skip-unresolved"]) == 0
        assert capsys.readouterr().out == "-- creating table T --\nCREATE TABLE T (\n\tA INTEGER);\n\n"


class TestOtherCommands:
    """Commands other than generate."""

    def test_list_dialects(self, capsys):
        assert main(["dialects"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Available dialects:"
        assert "  postgresql" in lines
        assert "  sqlite" in lines

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: ddlkit" in capsys.readouterr().out
