"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures (field-specific)
- BusinessRuleError: Domain rule violations
- AuthenticationError: Identity could not be established
- AuthorizationError: Identity established, action not allowed
- NotFoundError: Resource not found
- ConflictError: Resource conflicts (duplicates)
- PrivacyError: Request would expose protected personal data

Usage:
    from workflo_auth.core.errors import ValidationError
    from workflo_auth.core.result import Failure

    return Failure(error=ValidationError.required("Email", field="email"))
"""

from dataclasses import dataclass
from typing import ClassVar

from workflo_auth.core.enums import ErrorCategory, ErrorCode
from workflo_auth.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum (VALIDATION_*).
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    category: ClassVar[ErrorCategory] = ErrorCategory.VALIDATION

    field: str | None = None

    @classmethod
    def required(cls, label: str, *, field: str | None = None) -> "ValidationError":
        return cls(
            code=ErrorCode.VALIDATION_REQUIRED,
            message=f"{label} is required",
            field=field,
        )

    @classmethod
    def too_short(
        cls, label: str, min_length: int, *, field: str | None = None
    ) -> "ValidationError":
        return cls(
            code=ErrorCode.VALIDATION_TOO_SHORT,
            message=f"{label} must be at least {min_length} characters long",
            field=field,
        )

    @classmethod
    def too_long(
        cls, label: str, max_length: int, *, field: str | None = None
    ) -> "ValidationError":
        return cls(
            code=ErrorCode.VALIDATION_TOO_LONG,
            message=f"{label} must not exceed {max_length} characters",
            field=field,
        )

    @classmethod
    def invalid_format(
        cls, label: str, *, field: str | None = None
    ) -> "ValidationError":
        return cls(
            code=ErrorCode.VALIDATION_INVALID_FORMAT,
            message=f"{label} has an invalid format",
            field=field,
        )

    @classmethod
    def out_of_range(
        cls,
        label: str,
        minimum: int | float,
        maximum: int | float,
        *,
        field: str | None = None,
    ) -> "ValidationError":
        return cls(
            code=ErrorCode.VALIDATION_OUT_OF_RANGE,
            message=f"{label} must be between {minimum} and {maximum}",
            field=field,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class BusinessRuleError(DomainError):
    """Business rule violation (state machine, uniqueness, constraints)."""

    category: ClassVar[ErrorCategory] = ErrorCategory.BUSINESS_RULE

    @classmethod
    def invalid_state(cls, message: str) -> "BusinessRuleError":
        return cls(code=ErrorCode.BUSINESS_INVALID_STATE, message=message)

    @classmethod
    def already_exists(cls, message: str) -> "BusinessRuleError":
        return cls(code=ErrorCode.BUSINESS_ALREADY_EXISTS, message=message)

    @classmethod
    def constraint_violation(cls, message: str) -> "BusinessRuleError":
        return cls(code=ErrorCode.BUSINESS_CONSTRAINT_VIOLATION, message=message)

    @classmethod
    def invalid_user_state(cls, message: str) -> "BusinessRuleError":
        return cls(code=ErrorCode.BUSINESS_INVALID_USER_STATE, message=message)


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, bad token).

    Public responses collapse every authentication error into one uniform
    body, so ``message`` may be specific for logs.
    """

    category: ClassVar[ErrorCategory] = ErrorCategory.AUTHENTICATION


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (authenticated but not permitted)."""

    category: ClassVar[ErrorCategory] = ErrorCategory.AUTHORIZATION


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User, ...).
        resource_id: ID of the resource that was not found.
    """

    category: ClassVar[ErrorCategory] = ErrorCategory.NOT_FOUND

    resource_type: str
    resource_id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate, state conflict).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict.
    """

    category: ClassVar[ErrorCategory] = ErrorCategory.CONFLICT

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PrivacyError(DomainError):
    """Operation would expose protected personal data."""

    category: ClassVar[ErrorCategory] = ErrorCategory.PRIVACY
