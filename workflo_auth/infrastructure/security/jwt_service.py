"""JWT token service (adapter).

Implements TokenServiceProtocol using PyJWT with HMAC-SHA256.

Architecture:
    - Implements TokenServiceProtocol (no inheritance required)
    - Shares JWTCodec with the email verification token service
    - Refresh token identities recorded in a RefreshTokenStore

Token lifecycle:
    - Access tokens: stateless, short-lived (60 minutes by default)
    - Refresh tokens: signed JWTs whose ``jti`` is recorded server-side;
      revocation is authoritative and read-after-write consistent through
      the store
    - Zero clock skew on every expiry check

Claims:
    sub (user id), jti, iat, exp, iss, aud, typ (access/refresh) and, for
    access tokens, email_hash.
"""

from datetime import timedelta
from uuid import UUID

import structlog
from uuid_extensions import uuid7

from workflo_auth.core.result import Failure, Result, Success
from workflo_auth.domain.enums import TokenType
from workflo_auth.domain.errors import TokenError
from workflo_auth.domain.protocols import RefreshTokenRecord, RefreshTokenStore
from workflo_auth.domain.value_objects import TokenClaims
from workflo_auth.infrastructure.security.jwt_codec import (
    Clock,
    JWTCodec,
    timestamp_to_datetime,
)

logger = structlog.get_logger(__name__)


class JWTService:
    """Access and refresh token generation, validation and revocation.

    Usage:
        token_service = get_token_service()

        access_token = await token_service.generate_access_token(user.id, user.email_hash)
        refresh_token = await token_service.generate_refresh_token(user.id)

        result = await token_service.validate_token(access_token)
        await token_service.revoke_refresh_token(refresh_token)
    """

    def __init__(
        self,
        *,
        secret_key: str,
        refresh_token_store: RefreshTokenStore,
        issuer: str = "WorkFlo",
        audience: str = "WorkFlo",
        access_token_expire_minutes: int = 60,
        refresh_token_expire_days: int = 7,
        remember_me_expire_days: int = 30,
        clock: Clock | None = None,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing (>= 32 bytes).
            refresh_token_store: Authoritative refresh token state.
            issuer: ``iss`` claim.
            audience: ``aud`` claim.
            access_token_expire_minutes: Access token lifetime.
            refresh_token_expire_days: Refresh token lifetime.
            remember_me_expire_days: Refresh token lifetime with "remember me".
            clock: Optional clock override.

        Raises:
            ValueError: If secret_key is missing or too short.
        """
        self._codec = JWTCodec(
            secret_key=secret_key, issuer=issuer, audience=audience, clock=clock
        )
        self._store = refresh_token_store
        self._access_ttl = timedelta(minutes=access_token_expire_minutes)
        self._refresh_ttl = timedelta(days=refresh_token_expire_days)
        self._remember_me_ttl = timedelta(days=remember_me_expire_days)

    async def generate_access_token(self, user_id: UUID, email_hash: str) -> str:
        """Generate a JWT access token.

        Returns:
            Compact token string (header.payload.signature).
        """
        token, _ = self._codec.encode(
            {
                "sub": str(user_id),
                "jti": str(uuid7()),
                "typ": TokenType.ACCESS.value,
                "email_hash": email_hash,
            },
            expires_in=self._access_ttl,
        )
        return token

    async def generate_refresh_token(
        self, user_id: UUID, *, remember_me: bool = False
    ) -> str:
        """Generate a refresh token and record it as active.

        Args:
            user_id: User the token is issued to.
            remember_me: Selects the long-lived window.

        Returns:
            Compact token string.
        """
        token_id = str(uuid7())
        token, expires_at = self._codec.encode(
            {
                "sub": str(user_id),
                "jti": token_id,
                "typ": TokenType.REFRESH.value,
            },
            expires_in=self.get_token_expiry_time(remember_me),
        )
        await self._store.add(
            RefreshTokenRecord(token_id=token_id, user_id=user_id, expires_at=expires_at),
            now=self._codec.now(),
        )
        logger.debug("refresh_token_issued", user_id=str(user_id), remember_me=remember_me)
        return token

    async def validate_token(
        self, token: str, *, token_type: TokenType = TokenType.ACCESS
    ) -> Result[TokenClaims, TokenError]:
        """Validate a token and extract its claims.

        Checks signature, issuer/audience, expiry with zero clock skew, and
        that ``typ`` matches ``token_type``. Stateless: revocation is only
        consulted by ``validate_refresh_token``.

        Returns:
            Success(TokenClaims) or Failure(TokenError).
        """
        decoded = self._codec.decode(token, required=("sub", "jti", "typ", "iat"))
        if isinstance(decoded, Failure):
            return decoded
        payload = decoded.value

        if payload.get("typ") != token_type.value:
            return Failure(error=TokenError.type_invalid())

        try:
            user_id = UUID(payload["sub"])
        except ValueError:
            return Failure(error=TokenError.claims_invalid())

        return Success(
            value=TokenClaims(
                user_id=user_id,
                token_id=payload["jti"],
                token_type=token_type,
                issued_at=timestamp_to_datetime(payload["iat"]),
                expires_at=timestamp_to_datetime(payload["exp"]),
                email_hash=payload.get("email_hash"),
            )
        )

    async def get_user_id_from_token(
        self, token: str, *, token_type: TokenType = TokenType.ACCESS
    ) -> UUID | None:
        """Return the subject of a valid token, or None."""
        result = await self.validate_token(token, token_type=token_type)
        if isinstance(result, Failure):
            return None
        return result.value.user_id

    async def validate_refresh_token(self, token: str, user_id: UUID) -> bool:
        """Validate a refresh token for a specific user.

        The token must pass every stateless check, carry ``user_id`` as its
        subject, and still be active in the store for that same user.
        """
        result = await self.validate_token(token, token_type=TokenType.REFRESH)
        if isinstance(result, Failure):
            return False

        claims = result.value
        if claims.user_id != user_id:
            logger.warning("refresh_token_subject_mismatch", token_id=claims.token_id)
            return False

        return await self._store.is_active(claims.token_id, user_id, self._codec.now())

    async def revoke_refresh_token(self, token: str) -> bool:
        """Revoke a refresh token (Active -> Revoked).

        Idempotent. Expired tokens are revoked too; tokens that fail
        signature or claim checks are ignored.

        Returns:
            True if this call performed the transition, False otherwise.
        """
        result = self._codec.decode(
            token, required=("sub", "jti", "typ"), verify_expiry=False
        )
        if isinstance(result, Failure):
            logger.info("refresh_token_revoke_ignored", reason=result.error.code.value)
            return False

        payload = result.value
        if payload.get("typ") != TokenType.REFRESH.value:
            logger.info("refresh_token_revoke_ignored", reason="wrong_token_type")
            return False

        revoked = await self._store.revoke(payload["jti"], self._codec.now())
        if revoked:
            logger.info("refresh_token_revoked", token_id=payload["jti"])
        return revoked

    def get_token_expiry_time(self, is_remember_me: bool = False) -> timedelta:
        """Refresh token lifetime for the given "remember me" choice."""
        return self._remember_me_ttl if is_remember_me else self._refresh_ttl

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._access_ttl
