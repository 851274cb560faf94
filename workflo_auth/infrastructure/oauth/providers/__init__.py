"""Concrete OAuth providers."""

from workflo_auth.infrastructure.oauth.providers.google import GoogleOAuthProvider
from workflo_auth.infrastructure.oauth.providers.microsoft import (
    MicrosoftOAuthProvider,
)

__all__ = ["GoogleOAuthProvider", "MicrosoftOAuthProvider"]
