"""
Migration operation records and their safety gate.

Operations are only rendered here; executing them belongs to the host.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..security.migrations import confirm_destructive_operation
from ..utils import get_logger

logger = get_logger("schema.migration")


@dataclass
class MigrationOperation:
    sql: str
    destructive: bool = False
    force: bool = False
    description: str | None = None


def render_operations(operations: Sequence[MigrationOperation]) -> List[str]:
    """
    Return the SQL of ``operations`` in order.

    Any destructive operation without ``force`` stops the whole batch before
    a single statement is returned.
    """
    statements: List[str] = []
    for op in operations:
        if op.destructive:
            description = op.description or op.sql
            logger.warning("Destructive migration detected: %s (force=%s)", description, op.force)
            confirm_destructive_operation(description, force=op.force)
        statements.append(op.sql)
    return statements
