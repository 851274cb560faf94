"""Email verification token service.

Verification links carry a signed, purpose-scoped JWT rather than a random
string, so validation needs no database lookup.

Token Strategy:
    - HS256 JWT with sub (user id), purpose="email_verification", jti, iat,
      exp, iss, aud
    - 24-hour expiration by default
    - Single use: ``redeem_token`` records the ``jti`` in a UsedTokenStore;
      a replay within the validity window fails with TOKEN_ALREADY_USED

Validation order:
    presence, structure, signature, issuer/audience, expiry, purpose, subject.
"""

from datetime import timedelta
from typing import Any
from uuid import UUID

import structlog
from uuid_extensions import uuid7

from workflo_auth.core.constants import EMAIL_VERIFICATION_PURPOSE
from workflo_auth.core.result import Failure, Result, Success
from workflo_auth.domain.errors import TokenError
from workflo_auth.domain.protocols import UsedTokenStore
from workflo_auth.infrastructure.security.jwt_codec import (
    Clock,
    JWTCodec,
    timestamp_to_datetime,
)

logger = structlog.get_logger(__name__)


class EmailVerificationTokenService:
    """Email verification token generation and validation.

    Usage:
        service = get_email_verification_token_service()

        token = await service.generate_token(user.id)
        verification_url = f"{settings.verification_url_base}/verify-email?token={token}"

        match await service.redeem_token(token):
            case Success(value=user_id):
                ...
            case Failure(error=error):
                ...
    """

    def __init__(
        self,
        *,
        secret_key: str,
        issuer: str = "WorkFlo",
        audience: str = "WorkFlo",
        expiration_hours: int = 24,
        used_token_store: UsedTokenStore | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize email verification token service.

        Args:
            secret_key: HMAC secret (>= 32 bytes).
            issuer: ``iss`` claim.
            audience: ``aud`` claim.
            expiration_hours: Token lifetime (default: 24).
            used_token_store: Ledger for single-use enforcement. Without it
                ``redeem_token`` only validates.
            clock: Optional clock override.

        Raises:
            ValueError: If secret_key is missing or too short.
        """
        self._codec = JWTCodec(
            secret_key=secret_key, issuer=issuer, audience=audience, clock=clock
        )
        self._ttl = timedelta(hours=expiration_hours)
        self._used_tokens = used_token_store

    async def generate_token(self, user_id: UUID) -> str:
        token, _ = self._codec.encode(
            {
                "sub": str(user_id),
                "purpose": EMAIL_VERIFICATION_PURPOSE,
                "jti": str(uuid7()),
            },
            expires_in=self._ttl,
        )
        return token

    async def validate_token(self, token: str) -> Result[UUID, TokenError]:
        """Validate a verification token without consuming it.

        Returns:
            Success(user_id) or Failure(TokenError) naming the first failed
            check (required, malformed, signature, issuer, audience, expired,
            purpose, claims).
        """
        result = self._verify(token)
        if isinstance(result, Failure):
            return result
        return Success(value=result.value[0])

    async def redeem_token(self, token: str) -> Result[UUID, TokenError]:
        """Validate and consume a verification token.

        Returns:
            Success(user_id) on first redemption, Failure(TOKEN_ALREADY_USED)
            on any later one, or the validation failure.
        """
        result = self._verify(token)
        if isinstance(result, Failure):
            return result

        user_id, payload = result.value
        if self._used_tokens is not None:
            first_use = await self._used_tokens.mark_used(
                payload["jti"],
                timestamp_to_datetime(payload["exp"]),
                now=self._codec.now(),
            )
            if not first_use:
                logger.warning("verification_token_replayed", user_id=str(user_id))
                return Failure(error=TokenError.already_used())

        return Success(value=user_id)

    def _verify(self, token: str) -> Result[tuple[UUID, dict[str, Any]], TokenError]:
        decoded = self._codec.decode(token, required=("sub", "jti"))
        if isinstance(decoded, Failure):
            return decoded
        payload = decoded.value

        if payload.get("purpose") != EMAIL_VERIFICATION_PURPOSE:
            return Failure(error=TokenError.purpose_invalid())

        try:
            user_id = UUID(payload["sub"])
        except ValueError:
            return Failure(error=TokenError.claims_invalid())

        return Success(value=(user_id, payload))
