"""Loading schema definitions from JSON documents.

The expected document shape::

    {
      "name": "shop",
      "schema": "sales",
      "tables": [
        {"name": "ORDERS",
         "columns": [{"name": "ID", "type": "AUTOINC", "size": 4},
                     {"name": "NOTE", "type": "VARCHAR", "size": 80, "default": "n/a"}],
         "primary_key": ["ID"],
         "indexes": [{"name": "IDX_NOTE", "columns": ["NOTE"]}]}
      ],
      "relations": [
        {"name": "FK_ITEM_ORDER", "table": "ITEMS", "references": "ORDERS",
         "columns": [["ORDER_ID", "ID"]], "on_delete": "CASCADE"}
      ]
    }

A column default of ``"SYSDATE"`` means the database's current timestamp.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import orjson
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .definitions import (
    SYSDATE,
    DataType,
    Database,
    Index,
    ReferentialAction,
    Relation,
    Table,
    TableColumn,
)
from .errors import SchemaDefinitionError


class ColumnModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    data_type: DataType = Field(..., alias="type")
    size: float = 0
    required: bool = False
    auto_generated: Optional[bool] = None
    default: Any = None
    sequence_name: Optional[str] = None

    def to_column(self) -> TableColumn:
        default = SYSDATE if self.default == "SYSDATE" else self.default
        return TableColumn(
            name=self.name,
            data_type=self.data_type,
            size=self.size,
            required=self.required,
            auto_generated=self.auto_generated,
            default_value=default,
            sequence_name=self.sequence_name,
        )


class IndexModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    columns: List[str]
    unique: bool = False


class TableModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    columns: List[ColumnModel]
    primary_key: List[str] = Field(default_factory=list)
    indexes: List[IndexModel] = Field(default_factory=list)

    def to_table(self) -> Table:
        return Table(
            name=self.name,
            columns=tuple(c.to_column() for c in self.columns),
            primary_key=tuple(self.primary_key),
            indexes=tuple(Index(name=i.name, columns=tuple(i.columns), unique=i.unique) for i in self.indexes),
        )


class RelationModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    table: str
    references: str
    columns: List[Tuple[str, str]]
    on_delete: Optional[ReferentialAction] = None


class DatabaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: Optional[str] = None
    schema_name: Optional[str] = Field(default=None, alias="schema")
    tables: List[TableModel] = Field(default_factory=list)
    relations: List[RelationModel] = Field(default_factory=list)

    def to_database(self) -> Database:
        return Database(
            name=self.name,
            schema=self.schema_name,
            tables=tuple(t.to_table() for t in self.tables),
            relations=tuple(
                Relation(
                    name=r.name,
                    table=r.table,
                    references=r.references,
                    columns=tuple(r.columns),
                    on_delete=r.on_delete,
                )
                for r in self.relations
            ),
        )


def load_database(data: Dict[str, Any]) -> Database:
    """Build a Database from a decoded schema document.

    Raises:
        SchemaDefinitionError: If the document does not describe a valid schema
    """
    try:
        return DatabaseModel.model_validate(data).to_database()
    except ValidationError as e:
        raise SchemaDefinitionError("invalid schema document", e) from e


def load_database_file(path: Union[str, Path]) -> Database:
    """Read and build a Database from a JSON schema file.

    Raises:
        SchemaDefinitionError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        data = orjson.loads(path.read_bytes())
    except OSError as e:
        raise SchemaDefinitionError(f"cannot read schema file {path}", e) from e
    except orjson.JSONDecodeError as e:
        raise SchemaDefinitionError(f"schema file {path} is not valid JSON", e) from e
    if not isinstance(data, dict):
        raise SchemaDefinitionError(f"schema file {path} must contain a JSON object")
    return load_database(data)
