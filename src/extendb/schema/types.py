"""
Column type mapping expressed as an ordered table of guarded rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..core.columns import ColumnDescriptor, KeyContext, LogicalType
from ..dialects.base import DialectCapabilities

LINE_TERMINATOR = "\n"
UNKNOWN_TYPE = " UNKNOWN"

_NUMERIC_TYPES = (LogicalType.NUMBER, LogicalType.INTEGER, LogicalType.BIGNUMBER)
_TEMPORAL_TYPES = (LogicalType.TIMESTAMP, LogicalType.DATE)


@dataclass(frozen=True)
class TypeMapping:
    """
    Result of resolving a column: the fragment plus the rule that produced it.

    ``mapped`` is False only when nothing in the table matched and the
    unknown-type fragment was emitted.
    """

    sql: str
    rule: str
    mapped: bool = True


@dataclass(frozen=True)
class TypeRule:
    name: str
    applies: Callable[[ColumnDescriptor, KeyContext], bool]
    render: Callable[[ColumnDescriptor, DialectCapabilities], str]


def _has_type(column: ColumnDescriptor, types: tuple[LogicalType, ...]) -> bool:
    # Identity checks only; the descriptor may carry any foreign value.
    return any(column.logical_type is member for member in types)


def _is_numeric(column: ColumnDescriptor) -> bool:
    return _has_type(column, _NUMERIC_TYPES)


def _is_sized_number(column: ColumnDescriptor, keys: KeyContext) -> bool:
    return _is_numeric(column) and not keys.is_key(column.name) and column.length > 0


def _render_boolean(column: ColumnDescriptor, capabilities: DialectCapabilities) -> str:
    return "BOOLEAN" if capabilities.supports_boolean_data_type else "CHAR(1)"


def _render_varchar(column: ColumnDescriptor, capabilities: DialectCapabilities) -> str:
    # Zero length keeps the empty parentheses; no default length is invented.
    if column.length > 0:
        return f"VARCHAR({column.length})"
    return "VARCHAR()"


RULES: tuple[TypeRule, ...] = (
    TypeRule(
        "timestamp",
        lambda column, keys: _has_type(column, _TEMPORAL_TYPES),
        lambda column, caps: "TIMESTAMP",
    ),
    TypeRule(
        "boolean",
        lambda column, keys: column.logical_type is LogicalType.BOOLEAN,
        _render_boolean,
    ),
    TypeRule(
        "surrogate-key",
        lambda column, keys: _is_numeric(column) and keys.is_key(column.name),
        lambda column, caps: "BIGSERIAL" if column.length > 9 else "SERIAL",
    ),
    TypeRule(
        "numeric",
        lambda column, keys: _is_sized_number(column, keys)
        and (column.precision > 0 or column.length > 18),
        lambda column, caps: f"NUMERIC({column.length}, {column.precision})",
    ),
    TypeRule(
        "bigint",
        lambda column, keys: _is_sized_number(column, keys) and column.length > 9,
        lambda column, caps: "BIGINT",
    ),
    TypeRule(
        "smallint",
        lambda column, keys: _is_sized_number(column, keys) and column.length < 5,
        lambda column, caps: "SMALLINT",
    ),
    TypeRule(
        "integer",
        _is_sized_number,
        lambda column, caps: "INTEGER",
    ),
    TypeRule(
        "double",
        lambda column, keys: _is_numeric(column),
        lambda column, caps: "DOUBLE PRECISION",
    ),
    TypeRule(
        "varchar",
        lambda column, keys: column.logical_type is LogicalType.STRING,
        _render_varchar,
    ),
)


class ColumnTypeMapper:
    """
    Maps column descriptors to ExtenDB type fragments.

    Mapping never raises: a column no rule accepts resolves to the
    ``" UNKNOWN"`` fragment (leading space included) and the engine is left
    to reject the resulting statement.
    """

    def __init__(self, capabilities: DialectCapabilities, rules: tuple[TypeRule, ...] = RULES) -> None:
        self.capabilities = capabilities
        self.rules = rules

    def resolve(self, column: ColumnDescriptor, keys: KeyContext | None = None) -> TypeMapping:
        keys = keys or KeyContext.none()
        for rule in self.rules:
            if rule.applies(column, keys):
                return TypeMapping(rule.render(column, self.capabilities), rule.name)
        return TypeMapping(UNKNOWN_TYPE, "unknown", mapped=False)

    def map_type(self, column: ColumnDescriptor, keys: KeyContext | None = None) -> str:
        return self.resolve(column, keys).sql

    def field_definition(
        self,
        column: ColumnDescriptor,
        keys: KeyContext | None = None,
        *,
        add_field_name: bool = False,
        add_cr: bool = False,
    ) -> str:
        definition = self.map_type(column, keys)
        if add_field_name:
            definition = f"{column.name} {definition}"
        if add_cr:
            definition += LINE_TERMINATOR
        return definition
