"""Email hashing protocol."""

from typing import Protocol


class EmailHashingProtocol(Protocol):
    """Deterministic, salted email hashing for lookup without plaintext storage."""

    def hash_email(self, email: str) -> str:
        """Hash a normalized (trimmed, lowercased) email address.

        Raises:
            ValueError: If email is empty.
        """
        ...

    def verify_email(self, email: str, email_hash: str) -> bool:
        ...
