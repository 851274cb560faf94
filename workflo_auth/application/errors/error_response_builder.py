"""Error response builder for RFC 9457 Problem Details.

Converts DomainError values into ProblemDetails bodies. Disclosure rules:

- Status comes from the error category, never from the individual code.
- OAuth errors expose only their provider-neutral kind.
- Every other authentication error collapses into one uniform
  AUTHENTICATION_FAILED body, so callers cannot tell an unknown account
  from a wrong password or a revoked token.
- Only validation errors carry field-level ``errors``.
"""

from typing import Any

from workflo_auth.application.errors.problem_details import ErrorDetail, ProblemDetails
from workflo_auth.core.constants import ERROR_TYPE_BASE_URL
from workflo_auth.core.enums import ErrorCategory, ErrorCode
from workflo_auth.core.errors import DomainError, ValidationError
from workflo_auth.domain.errors import OAuthError, OAuthErrorKind

AUTHENTICATION_FAILED_DETAIL = "Authentication failed"

_TITLES: dict[ErrorCategory, str] = {
    ErrorCategory.VALIDATION: "Validation Failed",
    ErrorCategory.BUSINESS_RULE: "Business Rule Violation",
    ErrorCategory.AUTHENTICATION: "Authentication Failed",
    ErrorCategory.AUTHORIZATION: "Access Denied",
    ErrorCategory.NOT_FOUND: "Resource Not Found",
    ErrorCategory.CONFLICT: "Resource Conflict",
    ErrorCategory.PRIVACY: "Unavailable For Privacy Reasons",
    ErrorCategory.NONE: "Internal Server Error",
}

_OAUTH_DETAILS: dict[OAuthErrorKind, str] = {
    OAuthErrorKind.TIMEOUT: "The OAuth provider did not respond in time",
    OAuthErrorKind.NETWORK: "The OAuth provider could not be reached",
    OAuthErrorKind.UNEXPECTED: "Unexpected error during OAuth sign-in",
    OAuthErrorKind.TOKEN_EXCHANGE_FAILED: "The authorization code was rejected",
    OAuthErrorKind.USER_INFO_FAILED: "The OAuth provider did not return the user profile",
    OAuthErrorKind.INVALID_RESPONSE: "The OAuth provider returned an incomplete profile",
    OAuthErrorKind.UNSUPPORTED_PROVIDER: "Unsupported OAuth provider",
}


class ErrorResponseBuilder:
    """Build Problem Details bodies from domain errors.

    Example:
        >>> problem = ErrorResponseBuilder.from_domain_error(
        ...     error=TokenError.expired(),
        ...     instance="/api/v1/auth/me",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
        >>> problem.status, problem.code
        (401, 'AUTHENTICATION_FAILED')
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        instance: str,
        trace_id: str | None = None,
        *,
        base_url: str = ERROR_TYPE_BASE_URL,
    ) -> ProblemDetails:
        """Convert a DomainError into ProblemDetails.

        Args:
            error: Domain error to convert.
            instance: Request path of the failing occurrence.
            trace_id: Request trace ID.
            base_url: Prefix for the ``type`` URI.
        """
        code, detail = ErrorResponseBuilder._public_code_and_detail(error)
        return ProblemDetails(
            type=f"{base_url.rstrip('/')}/{code.lower().replace('_', '-')}",
            title=_TITLES[error.category],
            status=error.http_status,
            detail=detail,
            instance=instance,
            code=code,
            errors=ErrorResponseBuilder._field_errors(error),
            trace_id=trace_id,
        )

    @staticmethod
    def _public_code_and_detail(error: DomainError) -> tuple[str, str]:
        if isinstance(error, OAuthError):
            return error.code.value, _OAUTH_DETAILS[error.kind]
        if error.category is ErrorCategory.AUTHENTICATION:
            return ErrorCode.AUTHENTICATION_FAILED.value, AUTHENTICATION_FAILED_DETAIL
        return error.code.value, error.message

    @staticmethod
    def _field_errors(error: DomainError) -> list[ErrorDetail] | None:
        if not isinstance(error, ValidationError):
            return None

        reported: list[dict[str, Any]] = (error.details or {}).get("errors") or []
        if reported:
            return [
                ErrorDetail(
                    field=item.get("field") or "unknown",
                    code=item["code"],
                    message=item["message"],
                )
                for item in reported
            ]
        if error.field:
            return [
                ErrorDetail(field=error.field, code=error.code.value, message=error.message)
            ]
        return None
