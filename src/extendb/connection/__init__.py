"""
Connection targets and URL handling.
"""

from .target import ConnectionTarget
from .url import DEFAULT_PORT, URL_PREFIX, build_url, parse_url

__all__ = ["ConnectionTarget", "DEFAULT_PORT", "URL_PREFIX", "build_url", "parse_url"]
