"""
Column descriptors handed to the dialect by the host's schema model.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..utils.naming import names_match


class LogicalType(str, Enum):
    """
    Logical value types known to the host framework.

    Only the first seven have a dialect mapping; the remainder exist so the
    host can describe every column it knows about and still get a fragment.
    """

    STRING = "STRING"
    INTEGER = "INTEGER"
    NUMBER = "NUMBER"
    BIGNUMBER = "BIGNUMBER"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    TIMESTAMP = "TIMESTAMP"
    BINARY = "BINARY"
    SERIALIZABLE = "SERIALIZABLE"
    INET = "INET"
    NONE = "NONE"

    @classmethod
    def coerce(cls, value: Union["LogicalType", str, None]) -> Union["LogicalType", str, None]:
        """
        Normalise ``value`` to a member when possible.

        Unknown names are returned unchanged so they can fall through to the
        unknown-type rule instead of failing here.
        """
        if isinstance(value, cls) or not isinstance(value, str):
            return value
        try:
            return cls[value.strip().upper()]
        except KeyError:
            return value


@dataclass(frozen=True)
class ColumnDescriptor:
    name: str
    logical_type: Union[LogicalType, str]
    length: int = 0
    precision: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "logical_type", LogicalType.coerce(self.logical_type))


@dataclass(frozen=True)
class KeyContext:
    """
    Names of the technical and primary key columns of the target table.
    """

    technical_key: Optional[str] = None
    primary_key: Optional[str] = None

    @classmethod
    def none(cls) -> "KeyContext":
        return cls()

    def is_key(self, name: str) -> bool:
        return names_match(name, self.technical_key) or names_match(name, self.primary_key)
