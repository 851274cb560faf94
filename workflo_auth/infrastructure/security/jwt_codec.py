"""HS256 token codec shared by every token service.

Signs and verifies compact JWTs with PyJWT and applies checks in a fixed
order so each failure maps to exactly one TokenError:

1. presence            -> TOKEN_REQUIRED
2. structure           -> TOKEN_MALFORMED
3. signature           -> TOKEN_SIGNATURE_INVALID
4. required claims     -> TOKEN_CLAIMS_INVALID
5. issuer / audience   -> TOKEN_ISSUER_INVALID / TOKEN_AUDIENCE_INVALID
6. expiry (zero skew)  -> TOKEN_EXPIRED

Expiry:
    PyJWT truncates ``exp`` to whole seconds when it validates. ``exp`` is
    written as a float timestamp and checked here instead, so a token is
    expired as soon as ``exp <= now`` with millisecond precision and no
    leeway.
"""

from collections.abc import Callable, Iterable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import (
    DecodeError,
    InvalidAlgorithmError,
    InvalidAudienceError,
    InvalidIssuerError,
    InvalidSignatureError,
    InvalidTokenError,
    MissingRequiredClaimError,
)

from workflo_auth.core.constants import JWT_ALGORITHM, JWT_SECRET_MIN_LENGTH
from workflo_auth.core.result import Failure, Result, Success
from workflo_auth.domain.errors import TokenError

type Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class JWTCodec:
    """Encode and verify HS256 tokens with issuer/audience binding.

    Args:
        secret_key: HMAC secret, at least 32 bytes.
        issuer: Value written to and required in ``iss``.
        audience: Value written to and required in ``aud``.
        clock: Source of "now" (UTC-aware). Defaults to the system clock.

    Raises:
        ValueError: If secret_key is missing or shorter than 32 bytes.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        issuer: str,
        audience: str,
        clock: Clock | None = None,
    ) -> None:
        if not secret_key:
            raise ValueError("JWT secret key is not configured")
        if len(secret_key.encode("utf-8")) < JWT_SECRET_MIN_LENGTH:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._issuer = issuer
        self._audience = audience
        self._clock = clock or utc_now

    def now(self) -> datetime:
        return self._clock()

    def encode(
        self, claims: dict[str, Any], *, expires_in: timedelta
    ) -> tuple[str, datetime]:
        """Sign claims into a compact token.

        Args:
            claims: Token-specific claims (``sub``, ``jti``, ``typ``, ...).
            expires_in: Lifetime from now. May be negative (already expired).

        Returns:
            Tuple of the token string and its expiry instant.
        """
        now = self._clock()
        expires_at = now + expires_in
        payload = {
            **claims,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": int(now.timestamp()),
            "exp": expires_at.timestamp(),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=JWT_ALGORITHM)
        return token, expires_at

    def decode(
        self,
        token: str | None,
        *,
        required: Iterable[str] = ("sub", "jti"),
        verify_expiry: bool = True,
    ) -> Result[dict[str, Any], TokenError]:
        """Verify a token and return its payload.

        Args:
            token: Compact token string.
            required: Claims that must be present besides exp/iss/aud.
            verify_expiry: False to accept expired tokens (revocation of an
                already expired token still needs its ``jti``).

        Returns:
            Success(payload) or Failure(TokenError) for the first failing check.
        """
        if token is None or not token.strip():
            return Failure(error=TokenError.required())

        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[JWT_ALGORITHM],
                issuer=self._issuer,
                audience=self._audience,
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": ["exp", "iss", "aud", *required],
                },
            )
        except (InvalidSignatureError, InvalidAlgorithmError):
            return Failure(error=TokenError.signature_invalid())
        except MissingRequiredClaimError:
            return Failure(error=TokenError.claims_invalid())
        except InvalidIssuerError:
            return Failure(error=TokenError.issuer_invalid())
        except InvalidAudienceError:
            return Failure(error=TokenError.audience_invalid())
        except DecodeError:
            return Failure(error=TokenError.malformed())
        except InvalidTokenError:
            # Remaining claim-shape failures (non-string sub or jti, ...)
            return Failure(error=TokenError.claims_invalid())

        exp = payload.get("exp")
        if isinstance(exp, bool) or not isinstance(exp, int | float):
            return Failure(error=TokenError.claims_invalid())
        if verify_expiry and exp <= self._clock().timestamp():
            return Failure(error=TokenError.expired())

        return Success(value=payload)


def timestamp_to_datetime(value: int | float) -> datetime:
    return datetime.fromtimestamp(value, tz=UTC)
