"""Authentication DTOs (Data Transfer Objects).

Result dataclasses returned by the auth handlers. They carry the email
hash, never the plaintext email.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from workflo_auth.domain.entities import User


@dataclass(frozen=True, kw_only=True)
class UserSummary:
    """Public view of a user.

    Attributes:
        id: User id.
        email_hash: Salted email hash.
        email_verified: Verification status.
        created_at: Creation timestamp.
        preferred_name: Display name.
    """

    id: UUID
    email_hash: str
    email_verified: bool
    created_at: datetime
    preferred_name: str

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            id=user.id,
            email_hash=user.email_hash,
            email_verified=user.email_verified,
            created_at=user.created_at,
            preferred_name=user.preferred_name,
        )


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Issued credential pair.

    Attributes:
        access_token: Short-lived JWT.
        refresh_token: Long-lived revocable JWT.
        expires_at: Refresh window end (depends on "remember me").
        token_type: Always "bearer".
    """

    access_token: str
    refresh_token: str
    expires_at: datetime
    token_type: str = "bearer"

    def __repr__(self) -> str:
        return f"AuthTokens(token_type={self.token_type!r}, expires_at={self.expires_at!r})"


@dataclass(frozen=True, kw_only=True)
class RegistrationResponse:
    """Registration outcome. No tokens are issued until email is verified."""

    user: UserSummary
    email_verification_required: bool = True
    message: str = (
        "Registration successful. Please check your email for verification instructions."
    )


@dataclass(frozen=True, kw_only=True)
class LoginResponse:
    tokens: AuthTokens
    user: UserSummary


@dataclass(frozen=True, kw_only=True)
class NewUserLogin:
    """OAuth login that created the account (UnionResult variant 1)."""

    tokens: AuthTokens
    user: UserSummary
    provider: str


@dataclass(frozen=True, kw_only=True)
class ExistingUserLogin:
    """OAuth login into an existing account (UnionResult variant 2)."""

    tokens: AuthTokens
    user: UserSummary
    provider: str


@dataclass(frozen=True, kw_only=True)
class MessageResponse:
    message: str


@dataclass(frozen=True, kw_only=True)
class RefreshTokenStatus:
    """Outcome of a refresh token validity check.

    Attributes:
        user_id: Token subject.
        is_valid: Always True; invalid tokens are reported as failures.
        expires_at: Expiry instant carried by the token.
    """

    user_id: UUID
    is_valid: bool
    expires_at: datetime
