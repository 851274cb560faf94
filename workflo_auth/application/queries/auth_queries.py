"""Authentication queries (CQRS read operations)."""

from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class GetCurrentUser:
    """Resolve the user behind an access token."""

    access_token: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class ValidateRefreshToken:
    """Check whether a refresh token is still usable."""

    refresh_token: str = field(repr=False)
