"""
Connection URL formatting and parsing for ExtenDB.
"""

from __future__ import annotations

from typing import Tuple

from ..errors import ConnectionConfigurationError

URL_PREFIX = "jdbc:xdb://"
DEFAULT_PORT = 6453


def build_url(host: str, port: str | int, database_name: str) -> str:
    """
    Format a connection URL.

    Components are concatenated verbatim; nothing is validated or escaped.
    """
    return f"{URL_PREFIX}{host}:{port}/{database_name}"


def parse_url(url: str) -> Tuple[str, str, str]:
    """
    Split a ``jdbc:xdb://host[:port]/database`` URL into its components.

    A missing port yields the native default port.
    """
    if not url.startswith(URL_PREFIX):
        raise ConnectionConfigurationError(f"Not an ExtenDB URL (expected {URL_PREFIX!r} prefix): {url!r}")
    netloc, slash, database_name = url[len(URL_PREFIX):].partition("/")
    if not slash or not database_name:
        raise ConnectionConfigurationError(f"ExtenDB URL is missing a database name: {url!r}")
    host, colon, port = netloc.rpartition(":")
    if not colon:
        host, port = netloc, str(DEFAULT_PORT)
    if not host:
        raise ConnectionConfigurationError(f"ExtenDB URL is missing a host: {url!r}")
    if not port.isdigit():
        raise ConnectionConfigurationError(f"Invalid port in ExtenDB URL: {port!r}")
    return host, port, database_name
