"""Logging adapters (structlog)."""

from workflo_auth.infrastructure.logging.console_adapter import (
    ConsoleAdapter,
    configure_structlog,
)
from workflo_auth.infrastructure.logging.redaction import redact_sensitive_values

__all__ = ["ConsoleAdapter", "configure_structlog", "redact_sensitive_values"]
