import pytest

from extendb.core import ColumnDescriptor, KeyContext, LogicalType


def test_logical_type_coerce():
    assert LogicalType.coerce("bignumber") is LogicalType.BIGNUMBER
    assert LogicalType.coerce(" String ") is LogicalType.STRING
    assert LogicalType.coerce(LogicalType.DATE) is LogicalType.DATE
    assert LogicalType.coerce("GEOMETRY") == "GEOMETRY"
    assert LogicalType.coerce(None) is None


def test_column_descriptor_defaults_and_coercion():
    column = ColumnDescriptor("name", "string")
    assert column.logical_type is LogicalType.STRING
    assert column.length == 0
    assert column.precision == 0


def test_column_descriptor_is_frozen():
    column = ColumnDescriptor("name", LogicalType.STRING, length=10)
    with pytest.raises(AttributeError):
        column.length = 20  # type: ignore[misc]


def test_key_context_matching():
    keys = KeyContext(technical_key="TK_ID", primary_key="Pk")
    assert keys.is_key("tk_id")
    assert keys.is_key("PK")
    assert not keys.is_key("other")
    assert not KeyContext.none().is_key("id")
