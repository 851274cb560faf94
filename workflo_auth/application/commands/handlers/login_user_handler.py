"""LoginUser command handler.

Flow:
1. Find user by email hash
2. Check account exists and has a password
3. Verify password
4. Check account active
5. Check email verified
6. Record the login and issue an access/refresh pair
7. Return Success(LoginResponse)

Unknown email, OAuth-only account and wrong password all produce the same
INVALID_CREDENTIALS failure to prevent user enumeration.
"""

from typing import ClassVar

from workflo_auth.application.commands.auth_commands import LoginUser
from workflo_auth.application.commands.handlers.token_issuance import issue_tokens
from workflo_auth.application.cqrs.response_shape import ResponseShape
from workflo_auth.application.dtos import LoginResponse, UserSummary
from workflo_auth.core.enums import ErrorCode
from workflo_auth.core.errors import AuthenticationError, AuthorizationError, DomainError
from workflo_auth.core.result import Failure, Result, Success
from workflo_auth.domain.protocols import (
    EmailHashingProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenServiceProtocol,
    UserRepository,
)


class LoginError:
    """Login failure messages."""

    INVALID_CREDENTIALS = "Invalid email or password"
    ACCOUNT_DEACTIVATED = "User account is deactivated"
    EMAIL_NOT_VERIFIED = (
        "Please complete email verification before logging in. "
        "Check your email for the verification link."
    )


class LoginUserHandler:
    """Handler for email/password login."""

    response_shape: ClassVar[ResponseShape] = ResponseShape.RESULT

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        email_hasher: EmailHashingProtocol,
        password_service: PasswordHashingProtocol,
        token_service: TokenServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._email_hasher = email_hasher
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[LoginResponse, DomainError]:
        """Handle user login.

        Returns:
            Success(LoginResponse) on successful login.
            Failure(AuthenticationError) for bad credentials or unverified email.
            Failure(AuthorizationError) for deactivated accounts.
        """
        user = await self._user_repo.find_by_email_hash(
            self._email_hasher.hash_email(cmd.email)
        )

        if (
            user is None
            or user.password_hash is None
            or not self._password_service.verify_password(cmd.password, user.password_hash)
        ):
            self._logger.info("login_failed", reason="invalid_credentials")
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message=LoginError.INVALID_CREDENTIALS,
                )
            )

        if not user.is_active:
            self._logger.info("login_failed", reason="account_deactivated", user_id=str(user.id))
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.ACCOUNT_DEACTIVATED,
                    message=LoginError.ACCOUNT_DEACTIVATED,
                )
            )

        if not user.email_verified:
            self._logger.info("login_failed", reason="email_not_verified", user_id=str(user.id))
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.EMAIL_NOT_VERIFIED,
                    message=LoginError.EMAIL_NOT_VERIFIED,
                )
            )

        user.record_login()
        await self._user_repo.save(user)

        tokens = await issue_tokens(self._token_service, user, remember_me=cmd.remember_me)
        self._logger.info("login_succeeded", user_id=str(user.id), remember_me=cmd.remember_me)
        return Success(value=LoginResponse(tokens=tokens, user=UserSummary.from_user(user)))
