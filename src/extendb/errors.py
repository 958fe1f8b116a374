"""
Error hierarchy for extendb configuration paths.

DDL rendering and type mapping never raise; only configuration parsing does.
"""


class ExtenDBError(RuntimeError):
    """Base error for extendb failures."""


class DialectConfigurationError(ExtenDBError):
    """Raised when a dialect option carries an invalid value."""


class ConnectionConfigurationError(ExtenDBError):
    """Raised when a connection URL or its environment source is invalid."""
