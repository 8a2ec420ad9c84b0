"""Tests for column clause assembly."""

from datetime import date, datetime, time, timezone

from ddlkit.ddl.definitions import SYSDATE, DataType, TableColumn


def render(generator, column, alter=False):
    sql = []
    assert generator.render_column(column, alter, sql)
    return "".join(sql)


class TestNullability:
    """NOT NULL emission."""

    def test_optional_column_has_no_null_keyword(self, postgres):
        """Optional columns omit any nullability keyword."""
        assert render(postgres, TableColumn("NOTE", DataType.VARCHAR, size=80)) == "NOTE VARCHAR(80)"

    def test_required_column(self, postgres):
        """Required columns end with NOT NULL."""
        assert render(postgres, TableColumn("NOTE", DataType.VARCHAR, size=80, required=True)) == \
            "NOTE VARCHAR(80) NOT NULL"

    def test_required_with_default_keeps_not_null(self, postgres):
        """A default never removes NOT NULL from a required column."""
        column = TableColumn("STATUS", DataType.VARCHAR, size=10, required=True, default_value="new")
        assert render(postgres, column) == "STATUS VARCHAR(10) DEFAULT 'new' NOT NULL"

    def test_auto_generated_is_not_null(self, postgres):
        """Auto-generated columns are NOT NULL even when not required."""
        assert render(postgres, TableColumn("id", DataType.AUTOINC, size=4)) == "id SERIAL NOT NULL"


class TestDefaults:
    """DEFAULT clause emission."""

    def test_auto_generated_suppresses_default(self, postgres):
        """Auto-generated columns never render DEFAULT."""
        column = TableColumn("CREATED", DataType.TIMESTAMP, auto_generated=True, default_value=SYSDATE)
        assert render(postgres, column) == "CREATED TIMESTAMP NOT NULL"

    def test_sysdate_default(self, postgres):
        """SYSDATE renders as the current timestamp expression."""
        column = TableColumn("CREATED", DataType.DATETIME, default_value=SYSDATE)
        assert render(postgres, column) == "CREATED TIMESTAMP DEFAULT CURRENT_TIMESTAMP"

    def test_boolean_default(self, postgres, mysql):
        """Boolean literals follow the dialect."""
        column = TableColumn("ACTIVE", DataType.BOOL, default_value=True)
        assert render(postgres, column) == "ACTIVE BOOLEAN DEFAULT TRUE"
        assert render(mysql, column) == "ACTIVE TINYINT(1) DEFAULT 1"

    def test_boolean_default_from_string(self, postgres):
        """String defaults on BOOL columns are read as flags."""
        column = TableColumn("ACTIVE", DataType.BOOL, default_value="0")
        assert render(postgres, column) == "ACTIVE BOOLEAN DEFAULT FALSE"

    def test_text_default_is_escaped(self, postgres):
        """Single quotes inside text defaults are doubled."""
        column = TableColumn("OWNER", DataType.VARCHAR, size=40, default_value="O'Brien")
        assert render(postgres, column) == "OWNER VARCHAR(40) DEFAULT 'O''Brien'"

    def test_numeric_and_date_defaults(self, postgres):
        """Numbers are unquoted, dates are quoted."""
        assert render(postgres, TableColumn("QTY", DataType.INTEGER, size=4, default_value=0)) == \
            "QTY INTEGER DEFAULT 0"
        assert render(postgres, TableColumn("DUE", DataType.DATE, default_value=date(2024, 1, 31))) == \
            "DUE DATE DEFAULT '2024-01-31'"
        assert render(postgres, TableColumn("AT", DataType.DATETIME, default_value=datetime(2024, 1, 31, 8, 5))) == \
            "AT TIMESTAMP DEFAULT '2024-01-31 08:05:00'"

    def test_fractional_and_zoned_defaults_keep_precision(self, postgres):
        """Microseconds and UTC offsets survive in timestamp and time defaults."""
        stamp = datetime(2024, 1, 31, 8, 5, 0, 250000, tzinfo=timezone.utc)
        assert render(postgres, TableColumn("AT", DataType.TIMESTAMP, default_value=stamp)) == \
            "AT TIMESTAMP DEFAULT '2024-01-31 08:05:00.250000+00:00'"
        assert render(postgres, TableColumn("OPENS", DataType.TIME, default_value=time(9, 30, 0, 500))) == \
            "OPENS TIME DEFAULT '09:30:00.000500'"

    def test_defaults_disabled(self, no_defaults_postgres):
        """With column defaults turned off no DEFAULT is emitted."""
        column = TableColumn("STATUS", DataType.VARCHAR, size=10, required=True, default_value="new")
        assert render(no_defaults_postgres, column) == "STATUS VARCHAR(10) NOT NULL"


class TestNamesAndAlter:
    """Name quoting and the ALTER literal."""

    def test_reserved_name_is_quoted(self, postgres, mysql):
        """Reserved words are quoted with the dialect quote character."""
        column = TableColumn("order", DataType.INTEGER, size=4)
        assert render(postgres, column) == '"order" INTEGER'
        assert render(mysql, column) == "`order` INTEGER"

    def test_name_with_space_is_quoted(self, postgres):
        """Names that are not plain identifiers are quoted."""
        assert render(postgres, TableColumn("first name", DataType.VARCHAR, size=20)) == \
            '"first name" VARCHAR(20)'

    def test_alter_literal_postgres(self, postgres):
        """PostgreSQL inserts TYPE between name and type when altering."""
        column = TableColumn("AMOUNT", DataType.FLOAT, required=True)
        assert render(postgres, column, alter=True) == "AMOUNT TYPE DOUBLE PRECISION NOT NULL"
        assert render(postgres, column, alter=False) == "AMOUNT DOUBLE PRECISION NOT NULL"

    def test_alter_literal_default(self, standard):
        """The base ALTER literal is a single space."""
        column = TableColumn("AMOUNT", DataType.FLOAT)
        assert render(standard, column, alter=True) == "AMOUNT FLOAT"


class TestUnresolved:
    """Columns whose type cannot be rendered."""

    def test_returns_false_and_appends_nothing(self, postgres):
        """No partial clause is appended for an unknown type."""
        sql = ["existing"]
        column = TableColumn("MYSTERY", DataType.UNKNOWN, required=True, default_value="x")
        assert postgres.render_column(column, False, sql) is False
        assert sql == ["existing"]
