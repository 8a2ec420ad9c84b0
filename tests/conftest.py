"""Shared fixtures for ddlkit tests."""

import logging

import pytest

from ddlkit.core.config import GeneratorConfig
from ddlkit.ddl.definitions import (
    SYSDATE,
    DataType,
    Database,
    Index,
    ReferentialAction,
    Relation,
    Table,
    TableColumn,
)
from ddlkit.ddl.dialects import MYSQL, POSTGRESQL, SQLITE, STANDARD
from ddlkit.ddl.generator import DDLGenerator
from ddlkit.ddl.script import SqlScript

ENV_VARS = (
    "DDLKIT_DIALECT",
    "DDLKIT_SCHEMA",
    "DDLKIT_DDL_COLUMN_DEFAULTS",
    "DDLKIT_QUOTE_ALL_IDENTIFIERS",
    "DDLKIT_ON_UNRESOLVED",
    "DDLKIT_LOG_LEVEL",
)


@pytest.fixture
def script():
    return SqlScript()


@pytest.fixture
def postgres():
    return DDLGenerator(POSTGRESQL)


@pytest.fixture
def standard():
    return DDLGenerator(STANDARD)


@pytest.fixture
def mysql():
    return DDLGenerator(MYSQL)


@pytest.fixture
def sqlite():
    return DDLGenerator(SQLITE)


@pytest.fixture
def no_defaults_postgres():
    return DDLGenerator(POSTGRESQL, GeneratorConfig(dialect="postgresql", ddl_column_defaults=False))


@pytest.fixture
def simple_database():
    """T(id AUTOINC 4, name VARCHAR 50 required)."""
    return Database(tables=(
        Table(
            name="T",
            columns=(
                TableColumn("id", DataType.AUTOINC, size=4),
                TableColumn("name", DataType.VARCHAR, size=50, required=True),
            ),
        ),
    ))


@pytest.fixture
def shop_database():
    """Two related tables with indexes, defaults and auto-increment keys."""
    orders = Table(
        name="ORDERS",
        columns=(
            TableColumn("ID", DataType.AUTOINC, size=4),
            TableColumn("NOTE", DataType.VARCHAR, size=80, default_value="n/a"),
            TableColumn("CREATED", DataType.DATETIME, default_value=SYSDATE),
        ),
        primary_key=("ID",),
        indexes=(Index("IDX_ORDERS_NOTE", ("NOTE",)),),
    )
    items = Table(
        name="ITEMS",
        columns=(
            TableColumn("ID", DataType.AUTOINC, size=8, sequence_name="ITEM_ID_SEQ"),
            TableColumn("ORDER_ID", DataType.INTEGER, size=4, required=True),
            TableColumn("PRICE", DataType.DECIMAL, size=10.2, required=True, default_value=0),
        ),
        primary_key=("ID",),
        indexes=(Index("IDX_ITEMS_ORDER", ("ORDER_ID",), unique=False),),
    )
    relation = Relation(
        name="FK_ITEMS_ORDER",
        table="ITEMS",
        references="ORDERS",
        columns=(("ORDER_ID", "ID"),),
        on_delete=ReferentialAction.CASCADE,
    )
    return Database(tables=(orders, items), relations=(relation,))


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    package_logger = logging.getLogger("ddlkit")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch restores the variables even when a .env file sets them
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
