import logging
import os
import subprocess
import sys
import textwrap

import extendb
from extendb.utils.logging import ROOT_LOGGER, configure_logging, get_logger


def test_get_logger_is_namespaced():
    logger = get_logger("tests.logging")
    assert logger.name == "extendb.tests.logging"


def test_package_logger_has_null_handler():
    handlers = logging.getLogger(ROOT_LOGGER).handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


def test_configure_logging_is_opt_in_and_idempotent():
    logger = logging.getLogger(ROOT_LOGGER)
    before = list(logger.handlers)
    level = logger.level
    try:
        handler = configure_logging()
        assert configure_logging() is handler
        added = [h for h in logger.handlers if h not in before]
        assert added == [handler]
    finally:
        for extra in [h for h in logger.handlers if h not in before]:
            logger.removeHandler(extra)
        logger.setLevel(level)


def test_ddl_rendering_writes_nothing_to_stderr():
    script = textwrap.dedent(
        """
        from extendb import ColumnDescriptor, ExtenDBDialect, LogicalType

        dialect = ExtenDBDialect()
        column = ColumnDescriptor("name", LogicalType.STRING, length=10)
        dialect.modify_column_sql("T", column)
        dialect.drop_column_sql("T", column)
        dialect.add_column_sql("T", ColumnDescriptor("raw", "GEOMETRY"))
        """
    )
    src_root = os.path.dirname(os.path.dirname(extendb.__file__))
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [src_root, env.get("PYTHONPATH")]))
    result = subprocess.run(
        [sys.executable, "-c", script], capture_output=True, text=True, check=True, env=env
    )
    assert result.stderr == ""
    assert result.stdout == ""
