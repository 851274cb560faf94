"""In-memory token stores (development and tests).

Both stores guard their state with one ``asyncio.Lock`` so every read sees
every completed write (read-after-write consistency within one process).
Production deployments replace them with a shared database-backed store
that keeps the same contract.
"""

import asyncio
from dataclasses import replace
from datetime import datetime
from uuid import UUID

from workflo_auth.domain.protocols import RefreshTokenRecord


class InMemoryRefreshTokenStore:
    """RefreshTokenStore backed by a dict keyed by ``jti``.

    Expired records (revoked or not) are pruned on ``add``; an expired token
    fails signature-level validation before the store is consulted.
    """

    def __init__(self) -> None:
        self._records: dict[str, RefreshTokenRecord] = {}
        self._lock = asyncio.Lock()

    async def add(self, record: RefreshTokenRecord, *, now: datetime) -> None:
        async with self._lock:
            self._prune(before=now)
            self._records[record.token_id] = record

    def _prune(self, *, before: datetime) -> None:
        expired = [jti for jti, r in self._records.items() if r.expires_at < before]
        for jti in expired:
            del self._records[jti]

    async def get(self, token_id: str) -> RefreshTokenRecord | None:
        async with self._lock:
            return self._records.get(token_id)

    async def is_active(self, token_id: str, user_id: UUID, now: datetime) -> bool:
        async with self._lock:
            record = self._records.get(token_id)
            if record is None:
                return False
            return (
                record.user_id == user_id
                and not record.is_revoked
                and record.expires_at > now
            )

    async def revoke(self, token_id: str, revoked_at: datetime) -> bool:
        async with self._lock:
            record = self._records.get(token_id)
            if record is None or record.is_revoked:
                return False
            self._records[token_id] = replace(record, revoked_at=revoked_at)
            return True


class InMemoryUsedTokenStore:
    """UsedTokenStore backed by a dict of ``jti`` to expiry.

    Entries are pruned once their token has expired, since an expired token
    fails validation before the ledger is consulted.
    """

    def __init__(self) -> None:
        self._used: dict[str, datetime] = {}
        self._lock = asyncio.Lock()

    async def mark_used(
        self, token_id: str, expires_at: datetime, *, now: datetime
    ) -> bool:
        async with self._lock:
            self._prune(before=now)
            if token_id in self._used:
                return False
            self._used[token_id] = expires_at
            return True

    def _prune(self, *, before: datetime) -> None:
        expired = [jti for jti, exp in self._used.items() if exp < before]
        for jti in expired:
            del self._used[jti]
