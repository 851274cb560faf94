"""Token error types.

Returned by the JWT and email verification token services. Every token
failure is an AuthenticationError, so the boundary answers all of them with
the same uniform response; the specific ``code`` is kept for logs and for
callers that need precise feedback (e.g. "link expired, request a new one").

Usage:
    from workflo_auth.domain.errors import TokenError

    return Failure(error=TokenError.expired())
"""

from dataclasses import dataclass

from workflo_auth.core.enums import ErrorCode
from workflo_auth.core.errors import AuthenticationError


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenError(AuthenticationError):
    """Token validation or lifecycle failure (code is one of TOKEN_*)."""

    @classmethod
    def required(cls) -> "TokenError":
        return cls(code=ErrorCode.TOKEN_REQUIRED, message="Token is required")

    @classmethod
    def malformed(cls) -> "TokenError":
        return cls(code=ErrorCode.TOKEN_MALFORMED, message="Invalid token")

    @classmethod
    def signature_invalid(cls) -> "TokenError":
        return cls(
            code=ErrorCode.TOKEN_SIGNATURE_INVALID, message="Invalid token signature"
        )

    @classmethod
    def issuer_invalid(cls) -> "TokenError":
        return cls(code=ErrorCode.TOKEN_ISSUER_INVALID, message="Invalid token issuer")

    @classmethod
    def audience_invalid(cls) -> "TokenError":
        return cls(
            code=ErrorCode.TOKEN_AUDIENCE_INVALID, message="Invalid token audience"
        )

    @classmethod
    def expired(cls) -> "TokenError":
        return cls(code=ErrorCode.TOKEN_EXPIRED, message="Token has expired")

    @classmethod
    def purpose_invalid(cls) -> "TokenError":
        return cls(code=ErrorCode.TOKEN_PURPOSE_INVALID, message="Invalid token purpose")

    @classmethod
    def type_invalid(cls) -> "TokenError":
        return cls(code=ErrorCode.TOKEN_TYPE_INVALID, message="Invalid token type")

    @classmethod
    def claims_invalid(cls) -> "TokenError":
        return cls(code=ErrorCode.TOKEN_CLAIMS_INVALID, message="Invalid token claims")

    @classmethod
    def revoked(cls) -> "TokenError":
        return cls(code=ErrorCode.TOKEN_REVOKED, message="Token has been revoked")

    @classmethod
    def already_used(cls) -> "TokenError":
        return cls(
            code=ErrorCode.TOKEN_ALREADY_USED, message="Token has already been used"
        )
