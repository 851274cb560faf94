"""In-memory persistence adapters."""

from workflo_auth.infrastructure.persistence.in_memory_token_store import (
    InMemoryRefreshTokenStore,
    InMemoryUsedTokenStore,
)
from workflo_auth.infrastructure.persistence.in_memory_user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryRefreshTokenStore",
    "InMemoryUsedTokenStore",
    "InMemoryUserRepository",
]
