"""Application DTOs."""

from workflo_auth.application.dtos.auth_dtos import (
    AuthTokens,
    ExistingUserLogin,
    LoginResponse,
    MessageResponse,
    NewUserLogin,
    RefreshTokenStatus,
    RegistrationResponse,
    UserSummary,
)

__all__ = [
    "AuthTokens",
    "ExistingUserLogin",
    "LoginResponse",
    "MessageResponse",
    "NewUserLogin",
    "RefreshTokenStatus",
    "RegistrationResponse",
    "UserSummary",
]
