"""Token pair issuance shared by login, refresh and OAuth login handlers."""

from datetime import UTC, datetime

from workflo_auth.application.dtos import AuthTokens
from workflo_auth.domain.entities import User
from workflo_auth.domain.protocols import TokenServiceProtocol


async def issue_tokens(
    token_service: TokenServiceProtocol, user: User, *, remember_me: bool
) -> AuthTokens:
    """Generate an access/refresh pair for ``user``.

    ``expires_at`` is the end of the refresh window selected by
    ``remember_me``.
    """
    access_token = await token_service.generate_access_token(user.id, user.email_hash)
    refresh_token = await token_service.generate_refresh_token(
        user.id, remember_me=remember_me
    )
    return AuthTokens(
        access_token=access_token,
        refresh_token=refresh_token,
        expires_at=datetime.now(UTC) + token_service.get_token_expiry_time(remember_me),
    )
