"""Core errors package.

Usage:
    from workflo_auth.core.errors import DomainError, ValidationError
"""

from workflo_auth.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleError,
    ConflictError,
    NotFoundError,
    PrivacyError,
    ValidationError,
)
from workflo_auth.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "BusinessRuleError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "PrivacyError",
]
