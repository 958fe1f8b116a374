"""
Connection target value object.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..dialects.base import AccessMode
from ..errors import ConnectionConfigurationError
from ..security.redaction import redact_url
from .url import build_url, parse_url


@dataclass(frozen=True)
class ConnectionTarget:
    """
    Where to connect: host, port and database plus the access mode.

    Built per connection attempt; carries no identity beyond its fields.
    """

    host: str
    port: str
    database_name: str
    access_mode: AccessMode = AccessMode.NATIVE
    source: str | None = None

    @property
    def url(self) -> str:
        return build_url(self.host, self.port, self.database_name)

    @classmethod
    def from_url(cls, url: str, **kwargs) -> "ConnectionTarget":
        host, port, database_name = parse_url(url)
        return cls(host=host, port=port, database_name=database_name, **kwargs)

    @classmethod
    def from_env(cls, env_var: str, **kwargs) -> "ConnectionTarget":
        """
        Build a target from an environment variable holding a URL.
        """

        value = os.getenv(env_var)
        if not value:
            raise ConnectionConfigurationError(f"Environment variable {env_var} is not set")
        return cls.from_url(value, source=env_var, **kwargs)

    def redacted_url(self) -> str:
        return redact_url(self.url)

    def descriptive_label(self) -> str:
        redacted = self.redacted_url()
        if self.source:
            return f"{self.source} ({redacted})"
        return redacted
