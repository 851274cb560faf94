"""OAuth provider protocol.

Each provider implements two steps; the shared orchestration
(``workflo_auth.infrastructure.oauth.authenticate``) sequences them.

Usage:
    provider: OAuthProviderProtocol = GoogleOAuthProvider(config=config)
    result = await authenticate(provider, code, redirect_uri)
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from workflo_auth.core.result import Result
from workflo_auth.domain.errors import OAuthError
from workflo_auth.domain.value_objects import OAuthUserInfo


class OAuthProviderProtocol(Protocol):
    """Authorization-code OAuth provider."""

    @property
    def name(self) -> str:
        """Lowercase provider name (google, microsoft)."""
        ...

    async def exchange_code(
        self, code: str, redirect_uri: str | None
    ) -> Result[str, OAuthError]:
        """Exchange an authorization code for a provider access token."""
        ...

    async def fetch_user_info(
        self, access_token: str
    ) -> Result[OAuthUserInfo, OAuthError]:
        """Fetch and normalize the user-info payload."""
        ...


class OAuthProviderLookup(Protocol):
    """Resolves a provider by name (case-insensitive)."""

    def get(self, name: str) -> Result[OAuthProviderProtocol, OAuthError]:
        ...


type OAuthAuthenticator = Callable[
    [OAuthProviderProtocol, str, str | None],
    Awaitable[Result[OAuthUserInfo, OAuthError]],
]
