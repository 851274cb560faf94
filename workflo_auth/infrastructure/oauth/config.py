"""OAuth provider configuration."""

from dataclasses import dataclass, field

from workflo_auth.core.constants import OAUTH_TIMEOUT_DEFAULT


@dataclass(frozen=True, slots=True, kw_only=True)
class OAuthProviderConfig:
    """Client registration and endpoints for one provider.

    ``client_secret`` is excluded from ``repr``.

    Attributes:
        name: Lowercase provider name (google, microsoft).
        client_id: OAuth client id.
        client_secret: OAuth client secret.
        token_endpoint: Authorization-code token endpoint URL.
        userinfo_endpoint: User-info endpoint URL.
        scope: Optional scope sent with the token request.
        timeout: Per-request timeout in seconds.
    """

    name: str
    client_id: str
    client_secret: str = field(repr=False)
    token_endpoint: str
    userinfo_endpoint: str
    scope: str | None = None
    timeout: float = OAUTH_TIMEOUT_DEFAULT
