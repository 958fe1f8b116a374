"""
extendb public package initialization.

Exposes the ExtenDB dialect together with the column value objects and
connection helpers its host framework passes in.
"""

from .connection import ConnectionTarget, build_url, parse_url  # noqa: F401
from .core import ColumnDescriptor, KeyContext, LogicalType  # noqa: F401
from .dialects import (  # noqa: F401
    EXTENDB_CAPABILITIES,
    AccessMode,
    Dialect,
    DialectCapabilities,
    ExtenDBDialect,
    get_extendb_dialect,
)
from .errors import ConnectionConfigurationError, DialectConfigurationError, ExtenDBError  # noqa: F401
from .schema import ColumnTypeMapper, MigrationOperation, SchemaBuilder, TypeMapping  # noqa: F401

__all__ = [
    "AccessMode",
    "ColumnDescriptor",
    "ColumnTypeMapper",
    "ConnectionConfigurationError",
    "ConnectionTarget",
    "Dialect",
    "DialectCapabilities",
    "DialectConfigurationError",
    "EXTENDB_CAPABILITIES",
    "ExtenDBDialect",
    "ExtenDBError",
    "KeyContext",
    "LogicalType",
    "MigrationOperation",
    "SchemaBuilder",
    "TypeMapping",
    "build_url",
    "get_extendb_dialect",
    "parse_url",
]
