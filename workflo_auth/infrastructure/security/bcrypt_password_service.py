"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Security:
    - Cost factor 12 by default (~250ms per hash), minimum 10 (~60ms)
    - Random salt per hash, so equal passwords hash differently
    - ``bcrypt.checkpw`` compares in constant time

Note:
    bcrypt only reads the first 72 bytes of its input. Passwords are capped
    at 128 characters by validation, so very long multi-byte passwords share
    a hash prefix; this is accepted.
"""

import bcrypt

from workflo_auth.core.constants import (
    BCRYPT_ROUNDS_DEFAULT,
    BCRYPT_ROUNDS_MAX,
    BCRYPT_ROUNDS_MIN,
)

_BCRYPT_MAX_BYTES = 72


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        password_service = get_password_service()
        password_hash = password_service.hash_password("SecurePass123!")
        is_valid = password_service.verify_password("SecurePass123!", password_hash)
    """

    def __init__(self, cost_factor: int = BCRYPT_ROUNDS_DEFAULT) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor. Logarithmic: each +1 doubles
                computation time (10 = ~60ms, 12 = ~250ms, 14 = ~1s).

        Raises:
            ValueError: If cost_factor is outside 10..20.
        """
        if cost_factor < BCRYPT_ROUNDS_MIN:
            msg = f"Cost factor must be at least {BCRYPT_ROUNDS_MIN} for security"
            raise ValueError(msg)
        if cost_factor > BCRYPT_ROUNDS_MAX:
            msg = f"Cost factor above {BCRYPT_ROUNDS_MAX} is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...), 60 characters.

        Raises:
            ValueError: If password is empty.

        Example:
            >>> service = BcryptPasswordService(cost_factor=10)
            >>> service.hash_password("SecurePass123!") != service.hash_password("SecurePass123!")
            True
        """
        if not password:
            raise ValueError("Password cannot be empty")

        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(_encode(password), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash. False for a mismatch, an empty
            input, or a hash that is not bcrypt format (never raises).
        """
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except (ValueError, AttributeError, TypeError):
            # Invalid hash format
            return False


def _encode(password: str) -> bytes:
    # Recent bcrypt releases reject inputs over 72 bytes instead of truncating.
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
