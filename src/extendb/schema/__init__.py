"""
Column type mapping and DDL rendering.
"""

from .builder import STATEMENT_SEPARATOR, SchemaBuilder
from .migration import MigrationOperation, render_operations
from .types import LINE_TERMINATOR, RULES, UNKNOWN_TYPE, ColumnTypeMapper, TypeMapping, TypeRule

__all__ = [
    "ColumnTypeMapper",
    "LINE_TERMINATOR",
    "MigrationOperation",
    "RULES",
    "STATEMENT_SEPARATOR",
    "SchemaBuilder",
    "TypeMapping",
    "TypeRule",
    "UNKNOWN_TYPE",
    "render_operations",
]
