"""Centralized constants for internal implementation details.

These are NOT environment-specific configuration. For settings that vary per
deployment use ``workflo_auth.core.config`` instead.

Example:
    >>> from workflo_auth.core.constants import JWT_ALGORITHM, BEARER_PREFIX
    >>> header = f"{BEARER_PREFIX}{access_token}"
"""

# =============================================================================
# Tokens and Keys
# =============================================================================

JWT_ALGORITHM: str = "HS256"
"""Signing algorithm for every token this service issues (HMAC-SHA256)."""

JWT_SECRET_MIN_LENGTH: int = 32
"""Minimum signing secret length in bytes (256 bits)."""

EMAIL_VERIFICATION_PURPOSE: str = "email_verification"
"""Purpose claim carried by email verification tokens."""

BCRYPT_ROUNDS_DEFAULT: int = 12
"""Default bcrypt work factor (cost parameter)."""

BCRYPT_ROUNDS_MIN: int = 10
"""Lowest accepted bcrypt work factor."""

BCRYPT_ROUNDS_MAX: int = 20
"""Highest accepted bcrypt work factor."""


# =============================================================================
# Timeouts
# =============================================================================

OAUTH_TIMEOUT_DEFAULT: float = 10.0
"""Default timeout for OAuth provider calls in seconds."""

BREACH_API_TIMEOUT_DEFAULT: float = 5.0
"""Default timeout for the Pwned Passwords range API in seconds."""


# =============================================================================
# Prefixes and Limits
# =============================================================================

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""

EMAIL_MAX_LENGTH: int = 254
PASSWORD_MIN_LENGTH: int = 8
PASSWORD_MAX_LENGTH: int = 128

DEFAULT_PREFERRED_NAME: str = "WorkFlo User"
"""Display name used when an OAuth provider does not supply one."""

ERROR_TYPE_BASE_URL: str = "https://api.workflo.app/errors"
"""Prefix of the ``type`` URI in problem details responses."""
