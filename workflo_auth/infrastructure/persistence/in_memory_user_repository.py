"""In-memory UserRepository (development and tests)."""

import asyncio
from uuid import UUID

from workflo_auth.domain.entities import User


class InMemoryUserRepository:
    """UserRepository backed by two dicts (by id and by email hash)."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, User] = {}
        self._by_email_hash: dict[str, UUID] = {}
        self._lock = asyncio.Lock()

    async def find_by_id(self, user_id: UUID) -> User | None:
        async with self._lock:
            return self._by_id.get(user_id)

    async def find_by_email_hash(self, email_hash: str) -> User | None:
        async with self._lock:
            user_id = self._by_email_hash.get(email_hash)
            return self._by_id.get(user_id) if user_id is not None else None

    async def exists_by_email_hash(self, email_hash: str) -> bool:
        async with self._lock:
            return email_hash in self._by_email_hash

    async def save(self, user: User) -> None:
        async with self._lock:
            self._by_id[user.id] = user
            self._by_email_hash[user.email_hash] = user.id

    async def add(self, user: User) -> bool:
        async with self._lock:
            if user.email_hash in self._by_email_hash:
                return False
            self._by_id[user.id] = user
            self._by_email_hash[user.email_hash] = user.id
            return True
