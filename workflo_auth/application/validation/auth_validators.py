"""Validation rules for auth commands and queries.

Each rules model mirrors the attributes of one message. Messages:

- RegisterUser: email required, <= 254 chars, valid format; password
  required, not blank, 8..128 chars; confirmation required and matching
- LoginUser / ResendVerification: email required and valid; password required
- OAuthLogin: provider and authorization code required
- VerifyEmail, LogoutUser, RefreshToken and the token queries: token required
"""

import re

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from workflo_auth.application.validation.pydantic_validator import (
    PydanticMessageValidator,
    reject,
)
from workflo_auth.core.constants import (
    EMAIL_MAX_LENGTH,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
)
from workflo_auth.core.enums import ErrorCode
from workflo_auth.core.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class _Rules(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


def _check_email(v: str | None) -> str:
    if v is None or not v.strip():
        reject(ValidationError.required("Email"))
    if len(v) > EMAIL_MAX_LENGTH:
        reject(ValidationError.too_long("Email", EMAIL_MAX_LENGTH))
    if not EMAIL_PATTERN.match(v.strip()):
        reject(
            ValidationError(
                code=ErrorCode.VALIDATION_INVALID_FORMAT,
                message="Email must be a valid email address",
            )
        )
    return v


def _check_required(v: str | None, label: str) -> str:
    if v is None or not v.strip():
        reject(ValidationError.required(label))
    return v


class RegisterUserRules(_Rules):
    email: str | None = None
    password: str | None = None
    confirm_password: str | None = None

    @field_validator("email")
    @classmethod
    def email_is_valid(cls, v: str | None) -> str:
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def password_is_acceptable(cls, v: str | None) -> str:
        if not v:
            reject(ValidationError.required("Password"))
        if not v.strip():
            reject(
                ValidationError(
                    code=ErrorCode.VALIDATION_REQUIRED,
                    message="Password cannot be empty or whitespace",
                )
            )
        if len(v) < PASSWORD_MIN_LENGTH:
            reject(ValidationError.too_short("Password", PASSWORD_MIN_LENGTH))
        if len(v) > PASSWORD_MAX_LENGTH:
            reject(ValidationError.too_long("Password", PASSWORD_MAX_LENGTH))
        return v

    @field_validator("confirm_password")
    @classmethod
    def confirmation_matches(cls, v: str | None, info: ValidationInfo) -> str:
        if not v:
            reject(ValidationError.required("Confirm password"))
        # Only compared when the password itself passed its own rules.
        password = info.data.get("password")
        if password is not None and v != password:
            reject(
                ValidationError(
                    code=ErrorCode.VALIDATION_INVALID_FORMAT,
                    message="Passwords do not match",
                )
            )
        return v


class LoginUserRules(_Rules):
    email: str | None = None
    password: str | None = None

    @field_validator("email")
    @classmethod
    def email_is_valid(cls, v: str | None) -> str:
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def password_is_present(cls, v: str | None) -> str:
        if not v:
            reject(ValidationError.required("Password"))
        return v


class ResendVerificationRules(_Rules):
    email: str | None = None

    @field_validator("email")
    @classmethod
    def email_is_valid(cls, v: str | None) -> str:
        return _check_email(v)


class OAuthLoginRules(_Rules):
    provider: str | None = None
    authorization_code: str | None = None

    @field_validator("provider")
    @classmethod
    def provider_is_present(cls, v: str | None) -> str:
        return _check_required(v, "Provider")

    @field_validator("authorization_code")
    @classmethod
    def code_is_present(cls, v: str | None) -> str:
        return _check_required(v, "Authorization code")


class VerifyEmailRules(_Rules):
    token: str | None = None

    @field_validator("token")
    @classmethod
    def token_is_present(cls, v: str | None) -> str:
        return _check_required(v, "Token")


class RefreshTokenRules(_Rules):
    refresh_token: str | None = None

    @field_validator("refresh_token")
    @classmethod
    def token_is_present(cls, v: str | None) -> str:
        return _check_required(v, "Refresh token")


class AccessTokenRules(_Rules):
    access_token: str | None = None

    @field_validator("access_token")
    @classmethod
    def token_is_present(cls, v: str | None) -> str:
        return _check_required(v, "Access token")


register_user_validator = PydanticMessageValidator(RegisterUserRules)
login_user_validator = PydanticMessageValidator(LoginUserRules)
resend_verification_validator = PydanticMessageValidator(ResendVerificationRules)
oauth_login_validator = PydanticMessageValidator(OAuthLoginRules)
verify_email_validator = PydanticMessageValidator(VerifyEmailRules)
refresh_token_validator = PydanticMessageValidator(RefreshTokenRules)
access_token_validator = PydanticMessageValidator(AccessTokenRules)
