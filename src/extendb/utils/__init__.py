"""
Utility helpers shared across extendb packages.
"""

from .logging import configure_logging, get_logger
from .naming import names_match, needs_quoting

__all__ = ["configure_logging", "get_logger", "names_match", "needs_quoting"]
