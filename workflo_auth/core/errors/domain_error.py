"""Base domain error class for railway-oriented programming.

DomainError is the base class for ALL expected failures. Errors flow through
the system as data inside ``Failure``, never as raised exceptions.

Architecture:
- Does NOT inherit from Exception (returned in Result, not raised)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Each subclass pins a ``category`` used for HTTP status selection

Usage:
    from workflo_auth.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        category: ClassVar[ErrorCategory] = ErrorCategory.CONFLICT
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from workflo_auth.core.enums import ErrorCategory, ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging. Never holds secrets.
    """

    category: ClassVar[ErrorCategory] = ErrorCategory.NONE

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    @property
    def http_status(self) -> int:
        return self.category.http_status

    def __str__(self) -> str:
        """String representation: ``[Category] CODE: message``."""
        return f"[{self.category.value}] {self.code.value}: {self.message}"
