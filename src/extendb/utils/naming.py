"""
Identifier helpers for extendb.
"""

import re


_PLAIN_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def names_match(name: str, other: str | None) -> bool:
    """
    Case-insensitive name comparison; an absent name never matches.
    """
    if other is None:
        return False
    return name.lower() == other.lower()


def needs_quoting(name: str) -> bool:
    return not _PLAIN_IDENTIFIER_RE.match(name)
