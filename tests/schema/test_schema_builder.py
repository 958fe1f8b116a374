import logging

import pytest

from extendb.core import ColumnDescriptor, KeyContext, LogicalType
from extendb.dialects import EXTENDB_CAPABILITIES
from extendb.schema import (
    STATEMENT_SEPARATOR,
    ColumnTypeMapper,
    MigrationOperation,
    SchemaBuilder,
    render_operations,
)

builder = SchemaBuilder(ColumnTypeMapper(EXTENDB_CAPABILITIES))

COLUMNS = [
    ColumnDescriptor("id", LogicalType.INTEGER, length=12),
    ColumnDescriptor("amount", LogicalType.NUMBER, length=10, precision=2),
    ColumnDescriptor("name", LogicalType.STRING, length=0),
    ColumnDescriptor("created", LogicalType.DATE),
    ColumnDescriptor("payload", LogicalType.BINARY),
]
KEYS = KeyContext(technical_key="ID", primary_key="pk")


def test_add_column_sql():
    column = ColumnDescriptor("name", LogicalType.STRING, length=40)
    assert builder.add_column_sql("customers", column) == "ALTER TABLE customers ADD name VARCHAR(40)"


def test_add_key_column_sql():
    column = ColumnDescriptor("id", LogicalType.INTEGER, length=5)
    assert builder.add_column_sql("T", column, KEYS) == "ALTER TABLE T ADD id SERIAL"


def test_drop_column_sql_ends_with_line_terminator():
    column = ColumnDescriptor("name", LogicalType.STRING, length=40)
    assert builder.drop_column_sql("customers", column) == "ALTER TABLE customers DROP name\n"


@pytest.mark.parametrize("column", COLUMNS, ids=lambda column: column.name)
def test_modify_is_drop_then_add(column):
    expected = (
        builder.drop_column_sql("T", column)
        + STATEMENT_SEPARATOR
        + builder.add_column_sql("T", column, KEYS)
    )
    assert builder.modify_column_sql("T", column, KEYS) == expected


def test_modify_sql_literal():
    column = ColumnDescriptor("qty", LogicalType.INTEGER, length=3)
    assert builder.modify_column_sql("stock", column) == (
        "ALTER TABLE stock DROP qty\n;\nALTER TABLE stock ADD qty SMALLINT"
    )


def test_unknown_type_add_does_not_raise(caplog):
    caplog.set_level(logging.WARNING, logger="extendb.schema.builder")
    sql = builder.add_column_sql("T", ColumnDescriptor("payload", "GEOMETRY"))
    assert sql == "ALTER TABLE T ADD payload  UNKNOWN"
    assert any("emitting UNKNOWN" in record.getMessage() for record in caplog.records)


def test_drop_and_modify_log_data_loss_warning(caplog):
    caplog.set_level(logging.WARNING, logger="extendb.schema.builder")
    column = ColumnDescriptor("name", LogicalType.STRING, length=10)
    local_builder = SchemaBuilder(ColumnTypeMapper(EXTENDB_CAPABILITIES))
    local_builder.drop_column_sql("T", column)
    local_builder.modify_column_sql("T", column)
    messages = [record.getMessage() for record in caplog.records]
    assert any("DROP column generated" in message for message in messages)
    assert any("existing column data is lost" in message for message in messages)


def test_operations_mark_destructive_changes():
    column = ColumnDescriptor("name", LogicalType.STRING, length=10)
    add = builder.add_column_operation("T", column)
    drop = builder.drop_column_operation("T", column)
    modify = builder.modify_column_operation("T", column, force=True)
    assert add.destructive is False
    assert drop.destructive is True and drop.force is False
    assert modify.destructive is True and modify.force is True
    assert modify.sql == builder.modify_column_sql("T", column)


def test_render_operations_requires_force_for_destructive():
    column = ColumnDescriptor("name", LogicalType.STRING, length=10)
    ops = [builder.add_column_operation("T", column), builder.drop_column_operation("T", column)]
    with pytest.raises(RuntimeError):
        render_operations(ops)


def test_render_operations_with_force():
    column = ColumnDescriptor("name", LogicalType.STRING, length=10)
    ops = [
        builder.add_column_operation("T", column),
        builder.modify_column_operation("T", column, force=True),
        MigrationOperation(sql="ALTER TABLE T DROP old\n", destructive=True, force=True),
    ]
    statements = render_operations(ops)
    assert statements == [op.sql for op in ops]


def test_add_column_with_unhashable_type_does_not_raise():
    sql = builder.add_column_sql("T", ColumnDescriptor("odd", ["STRING"], length=5))
    assert sql == "ALTER TABLE T ADD odd  UNKNOWN"
