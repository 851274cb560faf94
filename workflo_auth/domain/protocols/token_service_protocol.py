"""Token service protocols (access/refresh and email verification).

Architecture:
    - Domain defines protocols (ports)
    - Infrastructure implements them with PyJWT (JWTService,
      EmailVerificationTokenService)

All validation returns ``Result``; token failures are ``TokenError`` values.
"""

from datetime import timedelta
from typing import Protocol
from uuid import UUID

from workflo_auth.core.result import Result
from workflo_auth.domain.enums import TokenType
from workflo_auth.domain.errors import TokenError
from workflo_auth.domain.value_objects import TokenClaims


class TokenServiceProtocol(Protocol):
    """Access and refresh token lifecycle.

    States per refresh token: Issued -> Active -> {Expired | Revoked}.
    """

    async def generate_access_token(self, user_id: UUID, email_hash: str) -> str:
        ...

    async def generate_refresh_token(
        self, user_id: UUID, *, remember_me: bool = False
    ) -> str:
        ...

    async def validate_token(
        self, token: str, *, token_type: TokenType = TokenType.ACCESS
    ) -> Result[TokenClaims, TokenError]:
        """Verify signature, issuer/audience, expiry (zero skew) and type."""
        ...

    async def get_user_id_from_token(
        self, token: str, *, token_type: TokenType = TokenType.ACCESS
    ) -> UUID | None:
        ...

    async def validate_refresh_token(self, token: str, user_id: UUID) -> bool:
        """Validate the token and confirm it is still active for ``user_id``."""
        ...

    async def revoke_refresh_token(self, token: str) -> bool:
        """Transition Active -> Revoked. Idempotent; True only for the call that revoked."""
        ...

    def get_token_expiry_time(self, is_remember_me: bool = False) -> timedelta:
        ...


class EmailVerificationTokenProtocol(Protocol):
    """Purpose-scoped email verification tokens."""

    async def generate_token(self, user_id: UUID) -> str:
        ...

    async def validate_token(self, token: str) -> Result[UUID, TokenError]:
        """Verify without consuming the token."""
        ...

    async def redeem_token(self, token: str) -> Result[UUID, TokenError]:
        """Verify and consume; a second redemption fails with TOKEN_ALREADY_USED."""
        ...
