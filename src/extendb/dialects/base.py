"""
Dialect strategy interfaces describing capabilities and DDL rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Protocol, runtime_checkable

from ..core.columns import ColumnDescriptor, KeyContext

UNSUPPORTED_PORT = -1


class AccessMode(str, Enum):
    NATIVE = "NATIVE"
    JNDI = "JNDI"

    @classmethod
    def coerce(cls, value: "AccessMode | str") -> "AccessMode | None":
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            return None


def _upper_words(words: Iterable[str]) -> frozenset[str]:
    return frozenset(word.upper() for word in words)


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Static facts describing a backend. Instances are immutable.
    """

    reserved_words: frozenset[str] = field(default_factory=frozenset)
    default_port: int = UNSUPPORTED_PORT
    driver_class: str = ""
    used_libraries: tuple[str, ...] = ()
    supports_fetch_size: bool = True
    supports_bitmap_index: bool = True
    supports_synonyms: bool = False
    supports_boolean_data_type: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "reserved_words", _upper_words(self.reserved_words))
        object.__setattr__(self, "used_libraries", tuple(self.used_libraries))


@runtime_checkable
class Dialect(Protocol):
    """
    Strategy interface consumed by the host's connection and schema layers.
    """

    @property
    def name(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    def access_modes(self) -> tuple[AccessMode, ...]: ...

    def default_port(self, access_mode: AccessMode | str = AccessMode.NATIVE) -> int: ...

    def driver_class(self) -> str: ...

    def reserved_words(self) -> frozenset[str]: ...

    def supports_fetch_size(self) -> bool: ...

    def supports_bitmap_index(self) -> bool: ...

    def supports_synonyms(self) -> bool: ...

    def supports_boolean_data_type(self) -> bool: ...

    def used_libraries(self) -> tuple[str, ...]: ...

    def build_url(self, host: str, port: str, database_name: str) -> str: ...

    def is_reserved_word(self, word: str) -> bool: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def map_type(self, column: ColumnDescriptor, keys: KeyContext | None = None) -> str: ...

    def field_definition(
        self,
        column: ColumnDescriptor,
        keys: KeyContext | None = None,
        *,
        add_field_name: bool = False,
        add_cr: bool = False,
    ) -> str: ...

    def add_column_sql(
        self, table: str, column: ColumnDescriptor, keys: KeyContext | None = None
    ) -> str: ...

    def drop_column_sql(self, table: str, column: ColumnDescriptor) -> str: ...

    def modify_column_sql(
        self, table: str, column: ColumnDescriptor, keys: KeyContext | None = None
    ) -> str: ...
