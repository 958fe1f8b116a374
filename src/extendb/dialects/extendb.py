"""
ExtenDB dialect implementation.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Final, Mapping

from ..connection.url import DEFAULT_PORT, build_url
from ..core.columns import ColumnDescriptor, KeyContext
from ..errors import DialectConfigurationError
from ..schema.builder import SchemaBuilder
from ..schema.types import ColumnTypeMapper
from ..security.redaction import redact_options
from ..utils import get_logger, needs_quoting
from .base import UNSUPPORTED_PORT, AccessMode, Dialect, DialectCapabilities

RESERVED_WORDS: Final[tuple[str, ...]] = (
    "AFTER", "BINARY", "BOOLEAN", "DATABASES", "DBA", "ESTIMATE", "MODIFY", "NODE", "NODES", "OWNER",
    "PARENT", "PARTITION", "PARTITIONING", "PASSWORD", "PERCENT", "PUBLIC", "RENAME", "REPLICATED",
    "RESOURCE", "SAMPLE", "SERIAL", "SHOW", "STANDARD", "STAT", "STATISTICS", "TABLES", "TEMP", "TRAN",
    "UNSIGNED", "ZEROFILL",
)

EXTENDB_CAPABILITIES: Final[DialectCapabilities] = DialectCapabilities(
    reserved_words=frozenset(RESERVED_WORDS),
    default_port=DEFAULT_PORT,
    driver_class="com.extendb.connect.XDBDriver",
    used_libraries=("xdbjdbc.jar",),
    supports_fetch_size=False,
    supports_bitmap_index=False,
    supports_synonyms=False,
    supports_boolean_data_type=False,
)

BOOLEAN_OPTION = "SUPPORTS_BOOLEAN_DATA_TYPE"

_TRUE_VALUES = {"1", "true", "yes", "on", "y"}
_FALSE_VALUES = {"0", "false", "no", "off", "n"}


def _parse_bool(value: Any, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise DialectConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


class ExtenDBDialect:
    """
    ExtenDB dialect: static capabilities, URL shape and column DDL.

    Instances hold no mutable state and are safe to share between threads.
    """

    name: Final[str] = "extendb"

    def __init__(self, *, supports_boolean_data_type: bool = False) -> None:
        capabilities = EXTENDB_CAPABILITIES
        if supports_boolean_data_type != capabilities.supports_boolean_data_type:
            capabilities = replace(capabilities, supports_boolean_data_type=supports_boolean_data_type)
        self.capabilities: Final[DialectCapabilities] = capabilities
        self.types = ColumnTypeMapper(capabilities)
        self.schema = SchemaBuilder(self.types)

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> "ExtenDBDialect":
        """
        Build a dialect from connection attributes.

        Only ``SUPPORTS_BOOLEAN_DATA_TYPE`` is understood; other keys are
        ignored and logged at debug level.
        """

        options = dict(options or {})
        supports_boolean = False
        if BOOLEAN_OPTION in options:
            supports_boolean = _parse_bool(options.pop(BOOLEAN_OPTION), key=BOOLEAN_OPTION)
        if options:
            get_logger("dialects.extendb").debug(
                "Ignoring unsupported dialect options: %s", redact_options(options)
            )
        return cls(supports_boolean_data_type=supports_boolean)

    # Capabilities --------------------------------------------------------
    def access_modes(self) -> tuple[AccessMode, ...]:
        return (AccessMode.NATIVE, AccessMode.JNDI)

    def default_port(self, access_mode: AccessMode | str = AccessMode.NATIVE) -> int:
        if AccessMode.coerce(access_mode) is AccessMode.NATIVE:
            return self.capabilities.default_port
        return UNSUPPORTED_PORT

    def driver_class(self) -> str:
        return self.capabilities.driver_class

    def reserved_words(self) -> frozenset[str]:
        return self.capabilities.reserved_words

    def is_reserved_word(self, word: str) -> bool:
        return word.upper() in self.capabilities.reserved_words

    def supports_fetch_size(self) -> bool:
        return self.capabilities.supports_fetch_size

    def supports_bitmap_index(self) -> bool:
        return self.capabilities.supports_bitmap_index

    def supports_synonyms(self) -> bool:
        return self.capabilities.supports_synonyms

    def supports_boolean_data_type(self) -> bool:
        return self.capabilities.supports_boolean_data_type

    def used_libraries(self) -> tuple[str, ...]:
        return self.capabilities.used_libraries

    # Connection ----------------------------------------------------------
    def build_url(self, host: str, port: str, database_name: str) -> str:
        return build_url(host, port, database_name)

    # Identifiers ---------------------------------------------------------
    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def quote_field(self, identifier: str) -> str:
        if self.is_reserved_word(identifier) or needs_quoting(identifier):
            return self.quote_identifier(identifier)
        return identifier

    # Column DDL ----------------------------------------------------------
    def map_type(self, column: ColumnDescriptor, keys: KeyContext | None = None) -> str:
        return self.types.map_type(column, keys)

    def field_definition(
        self,
        column: ColumnDescriptor,
        keys: KeyContext | None = None,
        *,
        add_field_name: bool = False,
        add_cr: bool = False,
    ) -> str:
        return self.types.field_definition(
            column, keys, add_field_name=add_field_name, add_cr=add_cr
        )

    def add_column_sql(
        self, table: str, column: ColumnDescriptor, keys: KeyContext | None = None
    ) -> str:
        return self.schema.add_column_sql(table, column, keys)

    def drop_column_sql(self, table: str, column: ColumnDescriptor) -> str:
        return self.schema.drop_column_sql(table, column)

    def modify_column_sql(
        self, table: str, column: ColumnDescriptor, keys: KeyContext | None = None
    ) -> str:
        return self.schema.modify_column_sql(table, column, keys)


def get_extendb_dialect() -> Dialect:
    return ExtenDBDialect()
