"""Shared OAuth authorization-code orchestration.

One function sequences the two provider steps for every provider:

1. ``exchange_code``   -> provider access token
2. ``fetch_user_info`` -> normalized OAuthUserInfo

The first failure short-circuits; step 2 never runs if step 1 fails.
"""

import structlog

from workflo_auth.core.result import Failure, Result
from workflo_auth.domain.errors import OAuthError
from workflo_auth.domain.protocols import OAuthProviderProtocol
from workflo_auth.domain.value_objects import OAuthUserInfo

logger = structlog.get_logger(__name__)


async def authenticate(
    provider: OAuthProviderProtocol,
    code: str,
    redirect_uri: str | None = None,
) -> Result[OAuthUserInfo, OAuthError]:
    """Authenticate a user with an authorization code.

    Args:
        provider: Provider adapter.
        code: Authorization code from the callback.
        redirect_uri: Redirect URI used when the code was issued.

    Returns:
        Success(OAuthUserInfo) or Failure(OAuthError).

    Raises:
        ValueError: If code is empty or whitespace (caller error).

    Example:
        >>> result = await authenticate(google_provider, "code1")
        >>> match result:
        ...     case Success(value=info):
        ...         print(info.provider_id)
    """
    if code is None or not code.strip():
        raise ValueError("Authorization code cannot be empty")

    logger.info("oauth_authentication_started", provider=provider.name)

    token_result = await provider.exchange_code(code, redirect_uri)
    if isinstance(token_result, Failure):
        logger.warning(
            "oauth_authentication_failed",
            provider=provider.name,
            step="token_exchange",
            kind=token_result.error.kind.value,
        )
        return token_result

    user_result = await provider.fetch_user_info(token_result.value)
    if isinstance(user_result, Failure):
        logger.warning(
            "oauth_authentication_failed",
            provider=provider.name,
            step="user_info",
            kind=user_result.error.kind.value,
        )
        return user_result

    logger.info("oauth_authentication_succeeded", provider=provider.name)
    return user_result
