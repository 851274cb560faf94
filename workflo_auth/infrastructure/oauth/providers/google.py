"""Google OAuth provider.

User-info payload (``/oauth2/v2/userinfo``)::

    {"id": "...", "email": "...", "verified_email": true, "name": "..."}
"""

from typing import Any

from workflo_auth.core.result import Failure, Result, Success
from workflo_auth.domain.errors import OAuthError
from workflo_auth.domain.value_objects import OAuthUserInfo
from workflo_auth.infrastructure.oauth.config import OAuthProviderConfig
from workflo_auth.infrastructure.oauth.http_client import OAuthHttpClient


class GoogleOAuthProvider:
    """OAuthProviderProtocol implementation for Google."""

    def __init__(self, *, config: OAuthProviderConfig) -> None:
        self._client = OAuthHttpClient(config)

    @property
    def name(self) -> str:
        return self._client.provider_name

    async def exchange_code(
        self, code: str, redirect_uri: str | None
    ) -> Result[str, OAuthError]:
        return await self._client.exchange_code(code, redirect_uri)

    async def fetch_user_info(
        self, access_token: str
    ) -> Result[OAuthUserInfo, OAuthError]:
        payload = await self._client.fetch_user_payload(access_token)
        if isinstance(payload, Failure):
            return payload
        return self._to_user_info(payload.value)

    def _to_user_info(self, payload: dict[str, Any]) -> Result[OAuthUserInfo, OAuthError]:
        provider_id = self._client.text_field(payload.get("id"), allow_int=True)
        if not provider_id:
            return self._client.missing_field("id")
        email = self._client.text_field(payload.get("email"))
        if not email:
            return self._client.missing_field("email")

        return Success(
            value=OAuthUserInfo(
                email=email,
                provider_id=provider_id,
                provider=self.name,
                name=payload.get("name"),
                email_verified=payload.get("verified_email") is True,
            )
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provider={self.name!r})"
