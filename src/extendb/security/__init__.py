"""Security helpers for extendb."""

from .migrations import confirm_destructive_operation
from .redaction import redact_options, redact_url

__all__ = ["confirm_destructive_operation", "redact_options", "redact_url"]
