"""Server-side token state protocols.

The refresh token store is the single authoritative record of revocation.
Reads and writes go through the same consistency domain: once ``revoke``
returns, every later ``is_active`` for that token id is False.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class RefreshTokenRecord:
    """Stored state of one issued refresh token.

    Attributes:
        token_id: The token's ``jti``.
        user_id: User the token was issued to.
        expires_at: Expiry instant.
        revoked_at: Revocation instant, None while active.
    """

    token_id: str
    user_id: UUID
    expires_at: datetime
    revoked_at: datetime | None = None

    @property
    def is_revoked(self) -> bool:
        return self.revoked_at is not None


class RefreshTokenStore(Protocol):
    """Persistence of refresh token identities."""

    async def add(self, record: RefreshTokenRecord, *, now: datetime) -> None:
        """Store a newly issued token id.

        Records whose ``expires_at`` is before ``now`` may be discarded.
        """
        ...

    async def get(self, token_id: str) -> RefreshTokenRecord | None:
        ...

    async def is_active(self, token_id: str, user_id: UUID, now: datetime) -> bool:
        """True only if the record exists, belongs to user_id, is unrevoked
        and unexpired at ``now``."""
        ...

    async def revoke(self, token_id: str, revoked_at: datetime) -> bool:
        """Revoke a token id.

        Returns:
            True if this call changed state, False if already revoked or unknown.
        """
        ...


class UsedTokenStore(Protocol):
    """Single-use ledger for one-time tokens, keyed by ``jti``."""

    async def mark_used(
        self, token_id: str, expires_at: datetime, *, now: datetime
    ) -> bool:
        """Atomically record a token id as used.

        Entries whose ``expires_at`` is before ``now`` may be discarded.

        Returns:
            True on first use, False if it was already recorded.
        """
        ...
