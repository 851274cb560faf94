"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables (an
``.env`` file is honoured when present).

Architecture:
- Flat Settings structure (no nesting)
- Secrets are required fields with no default; a missing secret fails at
  startup, never at first use
- No module-level instance: call ``get_settings()``

Usage:
    from workflo_auth.core.config import get_settings

    settings = get_settings()
    minutes = settings.access_token_expire_minutes
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from workflo_auth.core.constants import (
    BCRYPT_ROUNDS_DEFAULT,
    BCRYPT_ROUNDS_MAX,
    BCRYPT_ROUNDS_MIN,
    JWT_SECRET_MIN_LENGTH,
    OAUTH_TIMEOUT_DEFAULT,
)
from workflo_auth.core.enums import Environment


class Settings(BaseSettings):
    """
    Auth service settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. ``.env`` file
        3. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Token signing
    jwt_secret_key: str = Field(
        description="HMAC secret for access, refresh and verification tokens",
    )
    jwt_issuer: str = Field(default="WorkFlo", description="Token issuer claim")
    jwt_audience: str = Field(default="WorkFlo", description="Token audience claim")
    access_token_expire_minutes: int = Field(
        default=60,
        description="Access token lifetime in minutes",
    )
    refresh_token_expire_days: int = Field(
        default=7,
        description="Refresh token lifetime in days",
    )
    remember_me_expire_days: int = Field(
        default=30,
        description="Refresh token lifetime in days when 'remember me' is set",
    )
    email_verification_expire_hours: int = Field(
        default=24,
        description="Email verification token lifetime in hours",
    )

    # Privacy
    email_hash_salt: str = Field(
        description="Salt mixed into email hashes (rotating it orphans every stored hash)",
    )

    # Passwords
    bcrypt_rounds: int = Field(
        default=BCRYPT_ROUNDS_DEFAULT,
        description="bcrypt work factor (12 = ~250ms per hash)",
    )
    breach_check_backend: str = Field(
        default="local",
        description="Password breach backend: 'local' list or 'pwned' range API",
    )
    pwned_passwords_api_url: str = Field(
        default="https://api.pwnedpasswords.com/range",
        description="Pwned Passwords k-anonymity range endpoint",
    )

    # Email links
    verification_url_base: str = Field(
        default="http://localhost:3000",
        description="Base URL for email verification links",
    )

    # OAuth
    oauth_timeout_seconds: float = Field(
        default=OAUTH_TIMEOUT_DEFAULT,
        description="Timeout for each OAuth provider HTTP call",
    )
    google_client_id: str | None = Field(default=None)
    google_client_secret: str | None = Field(default=None)
    google_token_endpoint: str = Field(default="https://oauth2.googleapis.com/token")
    google_userinfo_endpoint: str = Field(
        default="https://www.googleapis.com/oauth2/v2/userinfo"
    )
    google_scope: str | None = Field(default="openid email profile")
    microsoft_client_id: str | None = Field(default=None)
    microsoft_client_secret: str | None = Field(default=None)
    microsoft_token_endpoint: str = Field(
        default="https://login.microsoftonline.com/common/oauth2/v2.0/token"
    )
    microsoft_userinfo_endpoint: str = Field(
        default="https://graph.microsoft.com/v1.0/me"
    )
    microsoft_scope: str | None = Field(default="openid email profile User.Read")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret_key(cls, v: str) -> str:
        """
        Reject signing secrets shorter than 256 bits.

        Raises:
            ValueError: If the secret is shorter than 32 characters.
        """
        if len(v) < JWT_SECRET_MIN_LENGTH:
            raise ValueError(
                f"jwt_secret_key must be at least {JWT_SECRET_MIN_LENGTH} characters"
            )
        return v

    @field_validator("email_hash_salt")
    @classmethod
    def validate_email_hash_salt(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("email_hash_salt must not be empty")
        return v

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """
        Validate bcrypt rounds are within safe range.

        Raises:
            ValueError: If rounds are not between 10 and 20.
        """
        if not BCRYPT_ROUNDS_MIN <= v <= BCRYPT_ROUNDS_MAX:
            raise ValueError(
                f"bcrypt_rounds must be between {BCRYPT_ROUNDS_MIN} and {BCRYPT_ROUNDS_MAX}"
            )
        return v

    @field_validator("breach_check_backend")
    @classmethod
    def validate_breach_check_backend(cls, v: str) -> str:
        normalized = v.lower()
        if normalized not in {"local", "pwned"}:
            raise ValueError("breach_check_backend must be 'local' or 'pwned'")
        return normalized

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"log_level must be one of {sorted(valid_levels)}")
        return upper

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def google_configured(self) -> bool:
        return bool(self.google_client_id and self.google_client_secret)

    @property
    def microsoft_configured(self) -> bool:
        return bool(self.microsoft_client_id and self.microsoft_client_secret)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Raises:
        pydantic.ValidationError: If a required secret is missing or invalid.
    """
    return Settings()  # type: ignore[call-arg]
