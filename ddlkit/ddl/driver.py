"""Driver capabilities consulted while generating DDL.

The driver decides when identifiers need quoting, how names are qualified
with the schema, and how default values are rendered as SQL literals.
"""

import re
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, List, Optional

from ..core.config import GeneratorConfig
from .definitions import SYSDATE, DataType
from .dialects.base import DialectProfile

_PLAIN_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_TRUE_STRINGS = ("1", "true", "yes", "y", "on")


class SqlDriver:
    """Quoting, naming and literal rendering for one dialect."""

    def __init__(self, profile: DialectProfile, config: Optional[GeneratorConfig] = None):
        """Initialize the driver.

        Args:
            profile: The dialect profile supplying quote and literal settings
            config: Generator configuration, defaults used when omitted
        """
        self.profile = profile
        self.config = config or GeneratorConfig(dialect=profile.name)

    @property
    def ddl_column_defaults(self) -> bool:
        """Whether column-level DEFAULT clauses are emitted at all."""
        return self.config.ddl_column_defaults

    @property
    def schema_name(self) -> Optional[str]:
        return self.config.schema_name

    def detect_quote_name(self, name: str) -> bool:
        """Check whether an identifier needs quoting."""
        if self.config.quote_all_identifiers:
            return True
        if not _PLAIN_IDENTIFIER.match(name):
            return True
        return name.upper() in self.profile.reserved_words

    def quote_name(self, name: str) -> str:
        q = self.profile.quote_char
        return f"{q}{name.replace(q, q + q)}{q}"

    def append_name(self, sql: List[str], name: str, quote: Optional[bool] = None) -> None:
        """Append an identifier, quoting it when required."""
        if quote is None:
            quote = self.detect_quote_name(name)
        sql.append(self.quote_name(name) if quote else name)

    def append_qualified_name(self, sql: List[str], name: str, quote: Optional[bool] = None) -> None:
        """Append an object name prefixed with the configured schema."""
        if self.schema_name:
            self.append_name(sql, self.schema_name)
            sql.append(".")
        self.append_name(sql, name, quote)

    def qualified_name(self, name: str, quote: Optional[bool] = None) -> str:
        sql: List[str] = []
        self.append_qualified_name(sql, name, quote)
        return "".join(sql)

    def value_string(self, value: Any, data_type: DataType) -> str:
        """Render a Python value as a SQL literal for a column of ``data_type``."""
        if value is None:
            return "NULL"
        if value is SYSDATE:
            return self.profile.current_timestamp_sql
        if isinstance(value, bool):
            return self.profile.true_literal if value else self.profile.false_literal
        if data_type == DataType.BOOL and isinstance(value, (int, str)):
            truthy = str(value).strip().lower() in _TRUE_STRINGS
            return self.profile.true_literal if truthy else self.profile.false_literal
        if isinstance(value, (int, float, Decimal)):
            return str(value)
        if isinstance(value, datetime):
            return f"'{value.isoformat(sep=' ')}'"
        if isinstance(value, date):
            return f"'{value.isoformat()}'"
        if isinstance(value, time):
            return f"'{value.isoformat()}'"
        text = str(value).replace("'", "''")
        return f"'{text}'"
