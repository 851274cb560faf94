"""Message validator protocol.

Validators inspect a command or query and report every problem they find.
They never raise for invalid input; an empty list means "valid".
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationFailure:
    """One validation problem.

    Attributes:
        message: Human-readable message ("Email is required").
        field: Offending field name, if the problem is field-specific.
        code: Machine-readable code (VALIDATION_*).
    """

    message: str
    field: str | None = None
    code: str = "VALIDATION_FAILED"


class MessageValidator(Protocol):
    """Validator for one message type."""

    async def validate(self, message: Any) -> list[ValidationFailure]:
        ...
