"""
Dialect strategy registry.
"""

from .base import UNSUPPORTED_PORT, AccessMode, Dialect, DialectCapabilities
from .extendb import EXTENDB_CAPABILITIES, RESERVED_WORDS, ExtenDBDialect, get_extendb_dialect

__all__ = [
    "AccessMode",
    "Dialect",
    "DialectCapabilities",
    "EXTENDB_CAPABILITIES",
    "ExtenDBDialect",
    "RESERVED_WORDS",
    "UNSUPPORTED_PORT",
    "get_extendb_dialect",
]
