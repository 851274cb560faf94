"""User domain entity for authentication.

Pure business logic, no framework dependencies.

Privacy:
    The entity holds only the salted hash of the email address. Plaintext
    email exists transiently in the command that created the user and in
    outbound verification email, never here.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class User:
    """User domain entity with authentication business rules.

    Business Rules:
        - Email verification required before password login
        - Deactivated users cannot log in or refresh tokens
        - OAuth-created users may have no password hash

    Attributes:
        id: Unique user identifier (UUIDv7).
        email_hash: Salted SHA-256 hash of the normalized email.
        password_hash: bcrypt hash, or None for OAuth-only users.
        preferred_name: Display name.
        email_verified: Email verification status (blocks login if False).
        is_active: Account active status.
        oauth_provider: Provider that created the account, if any.
        oauth_provider_id: Provider-side user id, if any.
        created_at: Timestamp when user was created.
        updated_at: Timestamp when user was last updated.
        last_login_at: Timestamp of the last successful login.
    """

    id: UUID
    email_hash: str
    password_hash: str | None
    preferred_name: str
    email_verified: bool = False
    is_active: bool = True
    oauth_provider: str | None = None
    oauth_provider_id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    last_login_at: datetime | None = None

    def mark_email_verified(self) -> None:
        """Mark the email as verified (idempotent)."""
        if not self.email_verified:
            self.email_verified = True
            self.updated_at = datetime.now(UTC)

    def deactivate(self) -> None:
        self.is_active = False
        self.updated_at = datetime.now(UTC)

    def record_login(self) -> None:
        now = datetime.now(UTC)
        self.last_login_at = now
        self.updated_at = now

    def can_login_with_password(self) -> bool:
        """Check whether password login is possible for this account.

        Returns:
            bool: True if the account has a password hash.
        """
        return self.password_hash is not None
