"""UserRepository protocol.

The repository is keyed by email hash; plaintext email never reaches it.
"""

from typing import Protocol
from uuid import UUID

from workflo_auth.domain.entities import User


class UserRepository(Protocol):
    """User persistence port."""

    async def find_by_id(self, user_id: UUID) -> User | None:
        ...

    async def find_by_email_hash(self, email_hash: str) -> User | None:
        ...

    async def exists_by_email_hash(self, email_hash: str) -> bool:
        ...

    async def save(self, user: User) -> None:
        """Insert or update a user."""
        ...

    async def add(self, user: User) -> bool:
        """Insert a new user atomically.

        Returns:
            False (nothing stored) if the email hash is already taken.
        """
        ...
