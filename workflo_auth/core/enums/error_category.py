"""Error categories and their HTTP status mapping.

Every DomainError subclass belongs to exactly one category. The category is
what the boundary uses to pick an HTTP status; individual error codes never
leak into status selection.
"""

from enum import Enum


class ErrorCategory(Enum):
    """Broad classification of domain errors."""

    NONE = "None"
    VALIDATION = "Validation"
    BUSINESS_RULE = "BusinessRule"
    AUTHENTICATION = "Authentication"
    AUTHORIZATION = "Authorization"
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    PRIVACY = "Privacy"

    @property
    def http_status(self) -> int:
        """HTTP status code for errors of this category.

        Returns:
            int: Status code (400-599).
        """
        return _HTTP_STATUS[self]


_HTTP_STATUS: dict[ErrorCategory, int] = {
    ErrorCategory.VALIDATION: 400,
    ErrorCategory.BUSINESS_RULE: 422,
    ErrorCategory.AUTHENTICATION: 401,
    ErrorCategory.AUTHORIZATION: 403,
    ErrorCategory.NOT_FOUND: 404,
    ErrorCategory.CONFLICT: 409,
    ErrorCategory.PRIVACY: 451,
    ErrorCategory.NONE: 500,
}
