"""Normalized OAuth user info.

Every provider maps its own user-info payload onto this one shape.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, kw_only=True)
class OAuthUserInfo:
    """User identity returned by an OAuth provider.

    Attributes:
        email: Email address reported by the provider.
        provider_id: Provider-side user id.
        provider: Provider name (google, microsoft).
        name: Display name, if supplied.
        email_verified: Whether the provider vouches for the email.
    """

    email: str = field(repr=False)
    provider_id: str
    provider: str
    name: str | None = None
    email_verified: bool = False
