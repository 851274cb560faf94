"""HTTP transport for OAuth providers.

Every provider call goes through this client, which is the one place
transport exceptions are classified into OAuth error kinds:

- ``httpx.TimeoutException``   -> TIMEOUT
- other ``httpx.TransportError`` -> NETWORK
- any other ``Exception``      -> UNEXPECTED

Task cancellation is not an ``Exception`` and propagates untouched.

Non-2xx statuses and invalid JSON are returned as failures too. Failure
messages and log lines carry the provider name, operation and status code
only: never tokens, client secrets, codes or response bodies.
"""

from typing import Any

import httpx
import structlog

from workflo_auth.core.constants import BEARER_PREFIX
from workflo_auth.core.result import Failure, Result, Success
from workflo_auth.domain.errors import OAuthError, OAuthResponseError
from workflo_auth.infrastructure.oauth.config import OAuthProviderConfig

logger = structlog.get_logger(__name__)


class OAuthHttpClient:
    """Form-POST and bearer-GET helper bound to one provider.

    Attributes:
        _config: Provider configuration (endpoints, credentials, timeout).
    """

    def __init__(self, config: OAuthProviderConfig) -> None:
        self._config = config

    @property
    def provider_name(self) -> str:
        return self._config.name

    async def exchange_code(
        self, code: str, redirect_uri: str | None
    ) -> Result[str, OAuthError]:
        """Run the authorization_code grant against the token endpoint.

        Args:
            code: Authorization code from the provider callback.
            redirect_uri: Redirect URI used in the authorization request.

        Returns:
            Success(access_token) or Failure(OAuthError).
        """
        form = {
            "client_id": self._config.client_id,
            "client_secret": self._config.client_secret,
            "code": code,
            "grant_type": "authorization_code",
        }
        if self._config.scope:
            form["scope"] = self._config.scope
        if redirect_uri:
            form["redirect_uri"] = redirect_uri

        sent = await self._send(
            "POST", self._config.token_endpoint, operation="token_exchange", data=form
        )
        if isinstance(sent, Failure):
            return sent

        response = sent.value
        if not response.is_success:
            logger.warning(
                "oauth_token_exchange_rejected",
                provider=self.provider_name,
                status_code=response.status_code,
            )
            return Failure(
                error=OAuthError.token_exchange_failed(
                    self.provider_name, response.status_code
                )
            )

        parsed = self._parse_json(response, operation="token_exchange")
        if isinstance(parsed, Failure):
            return parsed

        access_token = parsed.value.get("access_token")
        if not isinstance(access_token, str) or not access_token:
            logger.error(
                "oauth_provider_contract_changed",
                provider=self.provider_name,
                operation="token_exchange",
                missing_field="access_token",
            )
            return Failure(
                error=OAuthResponseError.missing(self.provider_name, "access_token")
            )
        return Success(value=access_token)

    async def fetch_user_payload(
        self, access_token: str
    ) -> Result[dict[str, Any], OAuthError]:
        """GET the user-info endpoint with a bearer token.

        Returns:
            Success(raw JSON object) or Failure(OAuthError).
        """
        sent = await self._send(
            "GET",
            self._config.userinfo_endpoint,
            operation="user_info",
            headers={"Authorization": f"{BEARER_PREFIX}{access_token}"},
        )
        if isinstance(sent, Failure):
            return sent

        response = sent.value
        if not response.is_success:
            logger.warning(
                "oauth_user_info_rejected",
                provider=self.provider_name,
                status_code=response.status_code,
            )
            return Failure(
                error=OAuthError.user_info_failed(
                    self.provider_name, response.status_code
                )
            )
        return self._parse_json(response, operation="user_info")

    def missing_field(self, field_name: str) -> Failure[OAuthError]:
        """Build (and log) the failure for a payload missing a required field."""
        logger.error(
            "oauth_provider_contract_changed",
            provider=self.provider_name,
            operation="user_info",
            missing_field=field_name,
        )
        return Failure(error=OAuthResponseError.missing(self.provider_name, field_name))

    @staticmethod
    def text_field(value: Any, *, allow_int: bool = False) -> str | None:
        """Return ``value`` as non-blank text, or None if it is not usable.

        Args:
            value: Raw payload value.
            allow_int: Accept integer ids (rendered with ``str``).
        """
        if allow_int and isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    async def _send(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Result[httpx.Response, OAuthError]:
        try:
            async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                response = await client.request(
                    method, url, data=data, headers=headers
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            logger.warning(
                "oauth_request_timeout",
                provider=self.provider_name,
                operation=operation,
                error_type=type(e).__name__,
            )
            return Failure(error=OAuthError.timeout(self.provider_name))

        except httpx.TransportError as e:
            logger.warning(
                "oauth_network_error",
                provider=self.provider_name,
                operation=operation,
                error_type=type(e).__name__,
            )
            return Failure(
                error=OAuthError.network(self.provider_name, type(e).__name__)
            )

        except Exception as e:
            logger.error(
                "oauth_unexpected_error",
                provider=self.provider_name,
                operation=operation,
                error_type=type(e).__name__,
            )
            return Failure(
                error=OAuthError.unexpected(self.provider_name, type(e).__name__)
            )

    def _parse_json(
        self, response: httpx.Response, *, operation: str
    ) -> Result[dict[str, Any], OAuthError]:
        try:
            payload = response.json()
        except ValueError:
            logger.error(
                "oauth_invalid_json",
                provider=self.provider_name,
                operation=operation,
                status_code=response.status_code,
            )
            return Failure(
                error=OAuthError.unexpected(self.provider_name, "invalid JSON response")
            )

        if not isinstance(payload, dict):
            logger.error(
                "oauth_invalid_json",
                provider=self.provider_name,
                operation=operation,
                status_code=response.status_code,
            )
            return Failure(
                error=OAuthError.unexpected(
                    self.provider_name, "response is not a JSON object"
                )
            )
        return Success(value=payload)
