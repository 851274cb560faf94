"""Auth handler factories and the message bus.

``get_message_bus`` wires every command and query to its handler and
validators. Handlers are stateless, so one instance of each is shared.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from workflo_auth.core.config import get_settings
from workflo_auth.core.container.infrastructure import (
    get_breach_service,
    get_email_hasher,
    get_email_service,
    get_email_verification_token_service,
    get_logger,
    get_oauth_registry,
    get_password_service,
    get_token_service,
    get_user_repository,
)

if TYPE_CHECKING:
    from workflo_auth.application.cqrs.message_bus import MessageBus


@lru_cache()
def get_message_bus() -> "MessageBus":
    """Get the message bus with every auth handler registered.

    Usage:
        bus = get_message_bus()
        result = await bus.dispatch(LoginUser(email=..., password=...))
    """
    from workflo_auth.application.commands import (
        LoginUser,
        LogoutUser,
        OAuthLogin,
        RefreshToken,
        RegisterUser,
        ResendVerification,
        VerifyEmail,
    )
    from workflo_auth.application.commands.handlers import (
        LoginUserHandler,
        LogoutUserHandler,
        OAuthLoginHandler,
        RefreshTokenHandler,
        RegisterUserHandler,
        ResendVerificationHandler,
        VerifyEmailHandler,
    )
    from workflo_auth.application.cqrs.message_bus import MessageBus
    from workflo_auth.application.queries import GetCurrentUser, ValidateRefreshToken
    from workflo_auth.application.queries.handlers import (
        GetCurrentUserHandler,
        ValidateRefreshTokenHandler,
    )
    from workflo_auth.application.validation.auth_validators import (
        access_token_validator,
        login_user_validator,
        oauth_login_validator,
        refresh_token_validator,
        register_user_validator,
        resend_verification_validator,
        verify_email_validator,
    )
    from workflo_auth.infrastructure.oauth import authenticate

    settings = get_settings()
    logger = get_logger()
    user_repo = get_user_repository()
    email_hasher = get_email_hasher()
    token_service = get_token_service()
    verification_tokens = get_email_verification_token_service()

    bus = MessageBus(logger=logger)
    bus.register(
        RegisterUser,
        RegisterUserHandler(
            user_repo=user_repo,
            email_hasher=email_hasher,
            password_service=get_password_service(),
            breach_service=get_breach_service(),
            verification_tokens=verification_tokens,
            email_service=get_email_service(),
            verification_url_base=settings.verification_url_base,
            logger=logger,
        ),
        validators=[register_user_validator],
    )
    bus.register(
        LoginUser,
        LoginUserHandler(
            user_repo=user_repo,
            email_hasher=email_hasher,
            password_service=get_password_service(),
            token_service=token_service,
            logger=logger,
        ),
        validators=[login_user_validator],
    )
    bus.register(
        LogoutUser,
        LogoutUserHandler(token_service=token_service, logger=logger),
        validators=[refresh_token_validator],
    )
    bus.register(
        RefreshToken,
        RefreshTokenHandler(user_repo=user_repo, token_service=token_service, logger=logger),
        validators=[refresh_token_validator],
    )
    bus.register(
        OAuthLogin,
        OAuthLoginHandler(
            providers=get_oauth_registry(),
            authenticator=authenticate,
            user_repo=user_repo,
            email_hasher=email_hasher,
            token_service=token_service,
            logger=logger,
        ),
        validators=[oauth_login_validator],
    )
    bus.register(
        VerifyEmail,
        VerifyEmailHandler(
            user_repo=user_repo, verification_tokens=verification_tokens, logger=logger
        ),
        validators=[verify_email_validator],
    )
    bus.register(
        ResendVerification,
        ResendVerificationHandler(
            user_repo=user_repo,
            email_hasher=email_hasher,
            verification_tokens=verification_tokens,
            email_service=get_email_service(),
            verification_url_base=settings.verification_url_base,
            logger=logger,
        ),
        validators=[resend_verification_validator],
    )
    bus.register(
        GetCurrentUser,
        GetCurrentUserHandler(user_repo=user_repo, token_service=token_service),
        validators=[access_token_validator],
    )
    bus.register(
        ValidateRefreshToken,
        ValidateRefreshTokenHandler(token_service=token_service),
        validators=[refresh_token_validator],
    )
    return bus


def bootstrap() -> "MessageBus":
    """Validate configuration and build the message bus.

    Call once at startup so a missing or invalid secret fails immediately.

    Raises:
        pydantic.ValidationError: If settings are missing or invalid.
    """
    settings = get_settings()
    get_logger().info(
        "auth_service_bootstrapped",
        environment=settings.environment.value,
        breach_check_backend=settings.breach_check_backend,
    )
    return get_message_bus()


def reset_container() -> None:
    """Clear every cached singleton (tests and configuration reloads)."""
    from workflo_auth.core.container import infrastructure

    get_settings.cache_clear()
    get_message_bus.cache_clear()
    for factory in (
        infrastructure.get_logger,
        infrastructure.get_password_service,
        infrastructure.get_breach_service,
        infrastructure.get_email_hasher,
        infrastructure.get_refresh_token_store,
        infrastructure.get_used_token_store,
        infrastructure.get_user_repository,
        infrastructure.get_token_service,
        infrastructure.get_email_verification_token_service,
        infrastructure.get_email_service,
        infrastructure.get_oauth_registry,
    ):
        factory.cache_clear()
