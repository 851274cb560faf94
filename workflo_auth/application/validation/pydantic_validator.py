"""Pydantic-backed message validator.

Rules are written as a pydantic model whose field validators raise
``PydanticCustomError`` built from a ValidationError factory. The adapter
reads the message by attribute, collects every field error and converts
them to ValidationFailure values.
"""

from typing import Any, NoReturn

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from workflo_auth.application.validation.validator import ValidationFailure
from workflo_auth.core.errors import ValidationError


def reject(error: ValidationError) -> NoReturn:
    """Raise a domain validation error from inside a pydantic validator."""
    raise PydanticCustomError(error.code.value, error.message)


class PydanticMessageValidator:
    """MessageValidator adapter for a pydantic rules model.

    Example:
        >>> validator = PydanticMessageValidator(LoginUserRules)
        >>> await validator.validate(LoginUser(email="", password="x"))
        [ValidationFailure(message='Email is required', field='email', ...)]
    """

    def __init__(self, rules: type[BaseModel]) -> None:
        self._rules = rules

    async def validate(self, message: Any) -> list[ValidationFailure]:
        try:
            self._rules.model_validate(message, from_attributes=True)
        except PydanticValidationError as e:
            return [_to_failure(err) for err in e.errors()]
        return []

    def __repr__(self) -> str:
        return f"PydanticMessageValidator({self._rules.__name__})"


def _to_failure(err: Any) -> ValidationFailure:
    loc = err.get("loc") or ()
    error_type = str(err.get("type", ""))
    return ValidationFailure(
        message=str(err.get("msg", "Invalid value")),
        field=str(loc[0]) if loc else None,
        code=error_type if error_type.startswith("VALIDATION_") else "VALIDATION_FAILED",
    )
