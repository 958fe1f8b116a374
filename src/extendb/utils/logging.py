"""Logging helpers for extendb.

The package logger carries only a ``NullHandler``; rendering DDL never
writes anywhere unless the host opts in with :func:`configure_logging`.
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "extendb"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def configure_logging(level: int = logging.INFO) -> logging.Handler:
    """
    Attach a stderr handler to the ``extendb`` logger. Host opt-in only.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            return handler
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
