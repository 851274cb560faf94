"""Password hashing and breach screening protocols.

Architecture:
    - Domain defines protocols (ports)
    - Infrastructure implements adapters (BcryptPasswordService,
      LocalPasswordBreachService, PwnedPasswordsBreachService)
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        password_hash = password_service.hash_password("SecurePass123!")
        is_valid = password_service.verify_password("SecurePass123!", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...).

        Raises:
            ValueError: If password is empty (caller error).

        Note:
            - Same password produces different hashes (random salt)
            - Deliberately slow (>= ~50ms)
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True if password matches hash, False otherwise. A malformed hash
            returns False, never raises.
        """
        ...


class PasswordBreachProtocol(Protocol):
    """Known-compromised password screening."""

    async def is_password_breached(self, password: str) -> bool:
        """Check a candidate password against a breach source.

        Implementations must not log the password.
        """
        ...
