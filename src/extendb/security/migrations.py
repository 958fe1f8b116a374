"""Migration safety helpers."""

from __future__ import annotations

import logging

logger = logging.getLogger("extendb.migrations")


def confirm_destructive_operation(operation: str, *, force: bool = False) -> None:
    if force:
        logger.info("Destructive operation '%s' confirmed with force=True.", operation)
        return
    raise RuntimeError(
        f"Destructive migration operation '{operation}' requires explicit confirmation (pass force=True)."
    )
