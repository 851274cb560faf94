"""Validated token claims."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from workflo_auth.domain.enums import TokenType


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenClaims:
    """Claims of a token that passed every check.

    Attributes:
        user_id: Subject (``sub``).
        token_id: Unique token id (``jti``).
        token_type: Access or refresh (``typ``).
        issued_at: ``iat`` as an aware UTC datetime.
        expires_at: ``exp`` as an aware UTC datetime.
        email_hash: Email hash (access tokens only).
    """

    user_id: UUID
    token_id: str
    token_type: TokenType
    issued_at: datetime
    expires_at: datetime
    email_hash: str | None = None
