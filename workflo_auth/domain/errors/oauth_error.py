"""OAuth error types for the provider protocol contract.

These errors define the failure cases an OAuth provider adapter can return.
Messages name the provider and, at most, an HTTP status. They never include
response bodies, tokens, client secrets or email addresses.

Architecture:
- Domain layer errors (part of OAuthProviderProtocol contract)
- Inherit from DomainError (core layer)
- ``kind`` is the provider-neutral classification callers branch on

Usage:
    from workflo_auth.domain.errors import OAuthError, OAuthErrorKind

    match result:
        case Failure(error=OAuthError(kind=OAuthErrorKind.TIMEOUT)):
            ...
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from workflo_auth.core.enums import ErrorCategory, ErrorCode
from workflo_auth.core.errors import DomainError


class OAuthErrorKind(Enum):
    """Provider-neutral OAuth failure classification."""

    TIMEOUT = "timeout"
    NETWORK = "network"
    UNEXPECTED = "unexpected"
    TOKEN_EXCHANGE_FAILED = "token_exchange_failed"
    USER_INFO_FAILED = "user_info_failed"
    INVALID_RESPONSE = "invalid_response"
    UNSUPPORTED_PROVIDER = "unsupported_provider"


_KIND_CODES: dict[OAuthErrorKind, ErrorCode] = {
    OAuthErrorKind.TIMEOUT: ErrorCode.OAUTH_TIMEOUT,
    OAuthErrorKind.NETWORK: ErrorCode.OAUTH_NETWORK_ERROR,
    OAuthErrorKind.UNEXPECTED: ErrorCode.OAUTH_UNEXPECTED_ERROR,
    OAuthErrorKind.TOKEN_EXCHANGE_FAILED: ErrorCode.OAUTH_TOKEN_EXCHANGE_FAILED,
    OAuthErrorKind.USER_INFO_FAILED: ErrorCode.OAUTH_USER_INFO_FAILED,
    OAuthErrorKind.INVALID_RESPONSE: ErrorCode.OAUTH_INVALID_RESPONSE,
    OAuthErrorKind.UNSUPPORTED_PROVIDER: ErrorCode.OAUTH_UNSUPPORTED_PROVIDER,
}


@dataclass(frozen=True, slots=True, kw_only=True)
class OAuthError(DomainError):
    """OAuth flow failure.

    Attributes:
        code: Domain ErrorCode (OAUTH_*), derived from kind by ``of``.
        message: Human-readable message, free of secrets and payloads.
        kind: Provider-neutral classification.
        provider: Provider name (google, microsoft).
        is_retryable: Whether the caller may retry. False unless a policy
            layer decides otherwise.
    """

    category: ClassVar[ErrorCategory] = ErrorCategory.AUTHENTICATION

    kind: OAuthErrorKind
    provider: str
    is_retryable: bool = False

    @classmethod
    def of(cls, kind: OAuthErrorKind, provider: str, message: str) -> "OAuthError":
        return cls(code=_KIND_CODES[kind], message=message, kind=kind, provider=provider)

    @classmethod
    def timeout(cls, provider: str) -> "OAuthError":
        return cls.of(
            OAuthErrorKind.TIMEOUT,
            provider,
            f"Request timeout while communicating with {provider} OAuth",
        )

    @classmethod
    def network(cls, provider: str, reason: str) -> "OAuthError":
        return cls.of(
            OAuthErrorKind.NETWORK,
            provider,
            f"Network error during {provider} OAuth: {reason}",
        )

    @classmethod
    def unexpected(cls, provider: str, reason: str) -> "OAuthError":
        return cls.of(
            OAuthErrorKind.UNEXPECTED,
            provider,
            f"Unexpected error during {provider} OAuth: {reason}",
        )

    @classmethod
    def token_exchange_failed(cls, provider: str, status_code: int) -> "OAuthError":
        return cls.of(
            OAuthErrorKind.TOKEN_EXCHANGE_FAILED,
            provider,
            f"Failed to exchange authorization code with {provider}: HTTP {status_code}",
        )

    @classmethod
    def user_info_failed(cls, provider: str, status_code: int) -> "OAuthError":
        return cls.of(
            OAuthErrorKind.USER_INFO_FAILED,
            provider,
            f"Failed to get user info from {provider}: HTTP {status_code}",
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class OAuthResponseError(OAuthError):
    """Well-formed provider response missing a required field.

    Categorized as a validation failure rather than an unexpected error: it
    signals a provider contract change worth alerting on.

    Attributes:
        missing_field: Normalized name of the absent field.
    """

    category: ClassVar[ErrorCategory] = ErrorCategory.VALIDATION

    missing_field: str

    @classmethod
    def missing(cls, provider: str, missing_field: str) -> "OAuthResponseError":
        return cls(
            code=ErrorCode.OAUTH_INVALID_RESPONSE,
            message=f"Invalid response from {provider} - missing required fields",
            kind=OAuthErrorKind.INVALID_RESPONSE,
            provider=provider,
            missing_field=missing_field,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class UnsupportedOAuthProviderError(OAuthError):
    """Requested provider is not configured."""

    category: ClassVar[ErrorCategory] = ErrorCategory.VALIDATION

    @classmethod
    def for_provider(cls, provider: str) -> "UnsupportedOAuthProviderError":
        return cls(
            code=ErrorCode.OAUTH_UNSUPPORTED_PROVIDER,
            message=f"Unsupported OAuth provider: {provider}",
            kind=OAuthErrorKind.UNSUPPORTED_PROVIDER,
            provider=provider,
        )
