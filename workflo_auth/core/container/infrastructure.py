"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (structlog console adapter)
- Password hashing (bcrypt) and breach screening (local list / Pwned Passwords)
- Email hashing (salted SHA-256)
- Tokens (JWT access/refresh, email verification)
- Persistence (in-memory users, refresh tokens, used verification tokens)
- Email (stub)
- OAuth provider registry (only providers with client credentials)

Each factory reads ``get_settings()``; a missing or invalid secret raises
``pydantic.ValidationError`` on first use.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from workflo_auth.core.config import get_settings

if TYPE_CHECKING:
    from workflo_auth.domain.protocols import (
        EmailHashingProtocol,
        EmailServiceProtocol,
        EmailVerificationTokenProtocol,
        LoggerProtocol,
        OAuthProviderLookup,
        PasswordBreachProtocol,
        PasswordHashingProtocol,
        RefreshTokenStore,
        TokenServiceProtocol,
        UsedTokenStore,
        UserRepository,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from workflo_auth.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=not settings.is_development, level=settings.log_level)


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton.

    Returns BcryptPasswordService with the configured cost factor
    (12 = ~250ms per hash).
    """
    from workflo_auth.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_breach_service() -> "PasswordBreachProtocol":
    from workflo_auth.infrastructure.security import (
        LocalPasswordBreachService,
        PwnedPasswordsBreachService,
    )

    settings = get_settings()
    if settings.breach_check_backend == "pwned":
        return PwnedPasswordsBreachService(
            api_url=settings.pwned_passwords_api_url,
            fallback=LocalPasswordBreachService(),
        )
    return LocalPasswordBreachService()


@lru_cache()
def get_email_hasher() -> "EmailHashingProtocol":
    from workflo_auth.infrastructure.security import EmailHashingService

    return EmailHashingService(get_settings().email_hash_salt)


@lru_cache()
def get_refresh_token_store() -> "RefreshTokenStore":
    from workflo_auth.infrastructure.persistence import InMemoryRefreshTokenStore

    return InMemoryRefreshTokenStore()


@lru_cache()
def get_used_token_store() -> "UsedTokenStore":
    from workflo_auth.infrastructure.persistence import InMemoryUsedTokenStore

    return InMemoryUsedTokenStore()


@lru_cache()
def get_user_repository() -> "UserRepository":
    from workflo_auth.infrastructure.persistence import InMemoryUserRepository

    return InMemoryUserRepository()


@lru_cache()
def get_token_service() -> "TokenServiceProtocol":
    """Get JWT token service singleton.

    Shares the refresh token store with every other consumer so revocation
    is visible immediately.
    """
    from workflo_auth.infrastructure.security import JWTService

    settings = get_settings()
    return JWTService(
        secret_key=settings.jwt_secret_key,
        refresh_token_store=get_refresh_token_store(),
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        access_token_expire_minutes=settings.access_token_expire_minutes,
        refresh_token_expire_days=settings.refresh_token_expire_days,
        remember_me_expire_days=settings.remember_me_expire_days,
    )


@lru_cache()
def get_email_verification_token_service() -> "EmailVerificationTokenProtocol":
    from workflo_auth.infrastructure.security import EmailVerificationTokenService

    settings = get_settings()
    return EmailVerificationTokenService(
        secret_key=settings.jwt_secret_key,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        expiration_hours=settings.email_verification_expire_hours,
        used_token_store=get_used_token_store(),
    )


@lru_cache()
def get_email_service() -> "EmailServiceProtocol":
    from workflo_auth.infrastructure.email import StubEmailService

    return StubEmailService(logger=get_logger())


@lru_cache()
def get_oauth_registry() -> "OAuthProviderLookup":
    """Get OAuth provider registry with every configured provider.

    A provider is configured when both its client id and secret are set.
    """
    from workflo_auth.infrastructure.oauth import (
        GoogleOAuthProvider,
        MicrosoftOAuthProvider,
        OAuthProviderConfig,
        OAuthProviderRegistry,
    )

    settings = get_settings()
    registry = OAuthProviderRegistry()

    if settings.google_configured:
        registry.register(
            GoogleOAuthProvider(
                config=OAuthProviderConfig(
                    name="google",
                    client_id=settings.google_client_id or "",
                    client_secret=settings.google_client_secret or "",
                    token_endpoint=settings.google_token_endpoint,
                    userinfo_endpoint=settings.google_userinfo_endpoint,
                    scope=settings.google_scope,
                    timeout=settings.oauth_timeout_seconds,
                )
            )
        )
    if settings.microsoft_configured:
        registry.register(
            MicrosoftOAuthProvider(
                config=OAuthProviderConfig(
                    name="microsoft",
                    client_id=settings.microsoft_client_id or "",
                    client_secret=settings.microsoft_client_secret or "",
                    token_endpoint=settings.microsoft_token_endpoint,
                    userinfo_endpoint=settings.microsoft_userinfo_endpoint,
                    scope=settings.microsoft_scope,
                    timeout=settings.oauth_timeout_seconds,
                )
            )
        )

    get_logger().info("oauth_providers_configured", providers=registry.names)
    return registry
