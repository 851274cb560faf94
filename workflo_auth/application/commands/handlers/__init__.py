"""Command handlers."""

from workflo_auth.application.commands.handlers.login_user_handler import (
    LoginUserHandler,
)
from workflo_auth.application.commands.handlers.logout_user_handler import (
    LogoutUserHandler,
)
from workflo_auth.application.commands.handlers.oauth_login_handler import (
    OAuthLoginHandler,
)
from workflo_auth.application.commands.handlers.refresh_token_handler import (
    RefreshTokenHandler,
)
from workflo_auth.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from workflo_auth.application.commands.handlers.resend_verification_handler import (
    ResendVerificationHandler,
)
from workflo_auth.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)

__all__ = [
    "LoginUserHandler",
    "LogoutUserHandler",
    "OAuthLoginHandler",
    "RefreshTokenHandler",
    "RegisterUserHandler",
    "ResendVerificationHandler",
    "VerifyEmailHandler",
]
