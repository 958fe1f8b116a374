"""Redaction helpers for connection URLs and dialect options."""

from __future__ import annotations

from typing import Any, Mapping

REDACTED_VALUE = "***"

_SENSITIVE_KEY_TOKENS = (
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "apikey",
    "api_key",
    "access_key",
    "private_key",
)


def _compact(value: str) -> str:
    return "".join(ch for ch in value if ch.isalnum())


def is_sensitive_key(key: str) -> bool:
    normalized = key.lower()
    compact = _compact(normalized)
    for token in _SENSITIVE_KEY_TOKENS:
        if token in normalized or _compact(token) in compact:
            return True
    return False


def redact_options(options: Mapping[str, Any]) -> dict[str, Any]:
    return {key: REDACTED_VALUE if is_sensitive_key(str(key)) else val for key, val in options.items()}


def redact_url(url: str) -> str:
    """
    Mask sensitive ``key=value`` pairs in the query part of ``url``.

    Both ``?a=1&b=2`` and ``;a=1;b=2`` separators are understood; the
    structure of the URL is otherwise preserved.
    """
    for marker in ("?", ";"):
        index = url.find(marker)
        if index != -1:
            break
    else:
        return url

    head, tail = url[:index], url[index:]
    pieces: list[str] = []
    current = ""
    for ch in tail:
        if ch in "?;&":
            pieces.append(current)
            pieces.append(ch)
            current = ""
        else:
            current += ch
    pieces.append(current)

    redacted = []
    for piece in pieces:
        key, sep, _ = piece.partition("=")
        if sep and is_sensitive_key(key):
            redacted.append(f"{key}={REDACTED_VALUE}")
        else:
            redacted.append(piece)
    return head + "".join(redacted)
