"""
Schema builder rendering ALTER TABLE statements for column changes.
"""

from __future__ import annotations

from ..core.columns import ColumnDescriptor, KeyContext
from ..utils import get_logger
from .migration import MigrationOperation
from .types import LINE_TERMINATOR, ColumnTypeMapper

STATEMENT_SEPARATOR = ";" + LINE_TERMINATOR


class SchemaBuilder:
    """
    Produces ExtenDB DDL for adding, dropping and modifying columns.

    The engine has no ``MODIFY COLUMN``; a modify is rendered as a drop
    followed by a re-add, so the column's existing data is lost.
    """

    def __init__(self, types: ColumnTypeMapper) -> None:
        self.types = types
        self.logger = get_logger("schema.builder")

    def add_column_sql(
        self, table: str, column: ColumnDescriptor, keys: KeyContext | None = None
    ) -> str:
        mapping = self.types.resolve(column, keys)
        if not mapping.mapped:
            self.logger.warning(
                "No ExtenDB type for column %s of %s (logical type %r); emitting UNKNOWN.",
                column.name,
                table,
                column.logical_type,
            )
        return f"ALTER TABLE {table} ADD {column.name} {mapping.sql}"

    def drop_column_sql(self, table: str, column: ColumnDescriptor) -> str:
        self.logger.warning(
            "DROP column generated for %s.%s; confirm destructive migration before applying.",
            table,
            column.name,
        )
        return self._drop_statement(table, column)

    def modify_column_sql(
        self, table: str, column: ColumnDescriptor, keys: KeyContext | None = None
    ) -> str:
        self.logger.warning(
            "Modify of %s.%s is rendered as drop and re-add; existing column data is lost.",
            table,
            column.name,
        )
        drop = self._drop_statement(table, column)
        add = self.add_column_sql(table, column, keys)
        return f"{drop}{STATEMENT_SEPARATOR}{add}"

    @staticmethod
    def _drop_statement(table: str, column: ColumnDescriptor) -> str:
        return f"ALTER TABLE {table} DROP {column.name}{LINE_TERMINATOR}"

    # Operation records ---------------------------------------------------
    def add_column_operation(
        self, table: str, column: ColumnDescriptor, keys: KeyContext | None = None
    ) -> MigrationOperation:
        return MigrationOperation(
            sql=self.add_column_sql(table, column, keys),
            description=f"add column {column.name} to {table}",
        )

    def drop_column_operation(
        self, table: str, column: ColumnDescriptor, *, force: bool = False
    ) -> MigrationOperation:
        return MigrationOperation(
            sql=self.drop_column_sql(table, column),
            destructive=True,
            force=force,
            description=f"drop column {column.name} from {table}",
        )

    def modify_column_operation(
        self,
        table: str,
        column: ColumnDescriptor,
        keys: KeyContext | None = None,
        *,
        force: bool = False,
    ) -> MigrationOperation:
        return MigrationOperation(
            sql=self.modify_column_sql(table, column, keys),
            destructive=True,
            force=force,
            description=f"modify column {column.name} of {table} (drop and re-add)",
        )
