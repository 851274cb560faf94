"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state. All commands are
immutable (frozen=True) and keyword-only (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Validators registered on the message bus check them before any handler
- Handlers execute business logic and return Result types

Secret-bearing fields are excluded from ``repr``.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new user account.

    User cannot log in with a password until the email is verified.

    Example:
        >>> command = RegisterUser(
        ...     email="user@example.com",
        ...     password="SecurePass123!",
        ...     confirm_password="SecurePass123!",
        ... )
    """

    email: str = field(repr=False)
    password: str = field(repr=False)
    confirm_password: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate with email and password and receive tokens."""

    email: str = field(repr=False)
    password: str = field(repr=False)
    remember_me: bool = False


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """Revoke a refresh token."""

    refresh_token: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class RefreshToken:
    """Exchange a refresh token for a new token pair (rotation)."""

    refresh_token: str = field(repr=False)
    remember_me: bool = False


@dataclass(frozen=True, kw_only=True)
class OAuthLogin:
    """Log in (or sign up) through an OAuth provider.

    Attributes:
        provider: Provider name, case-insensitive (google, microsoft).
        authorization_code: Code from the provider callback.
        redirect_uri: Redirect URI used in the authorization request.
        remember_me: Selects the long refresh window.
    """

    provider: str
    authorization_code: str = field(repr=False)
    redirect_uri: str | None = None
    remember_me: bool = False


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Redeem an email verification token."""

    token: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class ResendVerification:
    """Send a fresh verification email to an unverified user."""

    email: str = field(repr=False)
