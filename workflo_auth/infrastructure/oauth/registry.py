"""OAuth provider registry.

Case-insensitive lookup of the providers configured for this deployment.
"""

from collections.abc import Iterable

from workflo_auth.core.result import Failure, Result, Success
from workflo_auth.domain.errors import OAuthError, UnsupportedOAuthProviderError
from workflo_auth.domain.protocols import OAuthProviderProtocol


class OAuthProviderRegistry:
    """Maps lowercase provider names to adapters.

    Example:
        >>> registry = OAuthProviderRegistry([google, microsoft])
        >>> registry.get("Google")  # Success(GoogleOAuthProvider(provider='google'))
    """

    def __init__(self, providers: Iterable[OAuthProviderProtocol] = ()) -> None:
        self._providers: dict[str, OAuthProviderProtocol] = {}
        for provider in providers:
            self.register(provider)

    def register(self, provider: OAuthProviderProtocol) -> None:
        self._providers[provider.name.lower()] = provider

    def get(self, name: str) -> Result[OAuthProviderProtocol, OAuthError]:
        provider = self._providers.get((name or "").strip().lower())
        if provider is None:
            return Failure(error=UnsupportedOAuthProviderError.for_provider(name))
        return Success(value=provider)

    @property
    def names(self) -> list[str]:
        return sorted(self._providers)
