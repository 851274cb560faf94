"""Domain errors package.

Usage:
    from workflo_auth.domain.errors import OAuthError, TokenError
"""

from workflo_auth.domain.errors.oauth_error import (
    OAuthError,
    OAuthErrorKind,
    OAuthResponseError,
    UnsupportedOAuthProviderError,
)
from workflo_auth.domain.errors.token_error import TokenError

__all__ = [
    "OAuthError",
    "OAuthErrorKind",
    "OAuthResponseError",
    "UnsupportedOAuthProviderError",
    "TokenError",
]
