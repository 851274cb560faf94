"""Email hashing service (adapter).

Users are looked up by a salted SHA-256 hash of their normalized email so
the plaintext address is never stored.

Hash format: base64(SHA-256(normalized_email + salt)), where
normalized_email is the trimmed, lowercased address. The salt comes from
settings; rotating it invalidates every stored hash.
"""

import base64
import hashlib
import hmac


class EmailHashingService:
    """Deterministic salted email hashing.

    Example:
        >>> service = EmailHashingService(salt="pepper")
        >>> service.hash_email(" User@Example.com ") == service.hash_email("user@example.com")
        True
    """

    def __init__(self, salt: str) -> None:
        if not salt:
            raise ValueError("Email hash salt cannot be empty")
        self._salt = salt

    def hash_email(self, email: str) -> str:
        """Hash an email address.

        Raises:
            ValueError: If email is empty or whitespace only.
        """
        normalized = _normalize(email)
        digest = hashlib.sha256(f"{normalized}{self._salt}".encode("utf-8")).digest()
        return base64.b64encode(digest).decode("ascii")

    def verify_email(self, email: str, email_hash: str) -> bool:
        """Recompute the hash and compare in constant time."""
        if not email_hash:
            return False
        return hmac.compare_digest(self.hash_email(email), email_hash)


def _normalize(email: str) -> str:
    if email is None or not email.strip():
        raise ValueError("Email cannot be empty")
    return email.strip().lower()
