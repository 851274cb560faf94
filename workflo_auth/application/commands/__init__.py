"""Auth commands (CQRS write side)."""

from workflo_auth.application.commands.auth_commands import (
    LoginUser,
    LogoutUser,
    OAuthLogin,
    RefreshToken,
    RegisterUser,
    ResendVerification,
    VerifyEmail,
)

__all__ = [
    "LoginUser",
    "LogoutUser",
    "OAuthLogin",
    "RefreshToken",
    "RegisterUser",
    "ResendVerification",
    "VerifyEmail",
]
