"""OAuth authorization-code support (transport, providers, orchestration)."""

from workflo_auth.infrastructure.oauth.authenticate import authenticate
from workflo_auth.infrastructure.oauth.config import OAuthProviderConfig
from workflo_auth.infrastructure.oauth.http_client import OAuthHttpClient
from workflo_auth.infrastructure.oauth.providers import (
    GoogleOAuthProvider,
    MicrosoftOAuthProvider,
)
from workflo_auth.infrastructure.oauth.registry import OAuthProviderRegistry

__all__ = [
    "GoogleOAuthProvider",
    "MicrosoftOAuthProvider",
    "OAuthHttpClient",
    "OAuthProviderConfig",
    "OAuthProviderRegistry",
    "authenticate",
]
