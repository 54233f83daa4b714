"""Policy utilities for Issue Intake MCP."""

from .redaction import redact_secrets

__all__ = [
    "redact_secrets",
]
