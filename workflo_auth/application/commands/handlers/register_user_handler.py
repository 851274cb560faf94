"""RegisterUser command handler.

Flow:
1. Hash the email (plaintext is never stored)
2. Reject duplicates by email hash
3. Reject passwords found in breach corpora
4. Hash the password with bcrypt
5. Insert the unverified user (a concurrent duplicate loses the insert)
6. Generate a verification token and send the verification email
7. Return Success(RegistrationResponse)

Input shape (email format, password length, confirmation match) is
checked by the validation pipeline before this handler runs.

Architecture:
- Application layer ONLY imports from domain and core
- Infrastructure arrives through protocols
"""

from typing import ClassVar

from uuid_extensions import uuid7

from workflo_auth.application.commands.auth_commands import RegisterUser
from workflo_auth.application.cqrs.response_shape import ResponseShape
from workflo_auth.application.dtos import RegistrationResponse, UserSummary
from workflo_auth.core.constants import DEFAULT_PREFERRED_NAME
from workflo_auth.core.enums import ErrorCode
from workflo_auth.core.errors import BusinessRuleError, DomainError, ValidationError
from workflo_auth.core.result import Failure, Result, Success
from workflo_auth.domain.entities import User
from workflo_auth.domain.protocols import (
    EmailHashingProtocol,
    EmailServiceProtocol,
    EmailVerificationTokenProtocol,
    LoggerProtocol,
    PasswordBreachProtocol,
    PasswordHashingProtocol,
    UserRepository,
)

DUPLICATE_EMAIL_MESSAGE = "A user with this email address already exists"
BREACHED_PASSWORD_MESSAGE = (
    "This password has been found in a data breach. Please choose a different password."
)


class RegisterUserHandler:
    """Handler for user registration.

    Users start unverified; no tokens are issued here.
    """

    response_shape: ClassVar[ResponseShape] = ResponseShape.RESULT

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        email_hasher: EmailHashingProtocol,
        password_service: PasswordHashingProtocol,
        breach_service: PasswordBreachProtocol,
        verification_tokens: EmailVerificationTokenProtocol,
        email_service: EmailServiceProtocol,
        verification_url_base: str,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User persistence.
            email_hasher: Salted email hashing.
            password_service: bcrypt hashing.
            breach_service: Known-breached password check.
            verification_tokens: Email verification token issuer.
            email_service: Outbound email.
            verification_url_base: Base URL for the verification link.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._email_hasher = email_hasher
        self._password_service = password_service
        self._breach_service = breach_service
        self._verification_tokens = verification_tokens
        self._email_service = email_service
        self._verification_url_base = verification_url_base.rstrip("/")
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[RegistrationResponse, DomainError]:
        """Handle user registration.

        Returns:
            Success(RegistrationResponse) on success.
            Failure(BusinessRuleError) if the email is taken.
            Failure(ValidationError PASSWORD_BREACHED) for breached passwords.
        """
        email_hash = self._email_hasher.hash_email(cmd.email)

        if await self._user_repo.exists_by_email_hash(email_hash):
            self._logger.info("registration_rejected", reason="duplicate_email")
            return Failure(error=BusinessRuleError.already_exists(DUPLICATE_EMAIL_MESSAGE))

        if await self._breach_service.is_password_breached(cmd.password):
            self._logger.info("registration_rejected", reason="password_breached")
            return Failure(
                error=ValidationError(
                    code=ErrorCode.PASSWORD_BREACHED,
                    message=BREACHED_PASSWORD_MESSAGE,
                    field="password",
                )
            )

        user = User(
            id=uuid7(),
            email_hash=email_hash,
            password_hash=self._password_service.hash_password(cmd.password),
            preferred_name=DEFAULT_PREFERRED_NAME,
        )
        if not await self._user_repo.add(user):
            # Same email registered concurrently since the check above.
            self._logger.info("registration_rejected", reason="duplicate_email")
            return Failure(error=BusinessRuleError.already_exists(DUPLICATE_EMAIL_MESSAGE))

        token = await self._verification_tokens.generate_token(user.id)
        await self._email_service.send_verification_email(
            to_email=cmd.email,
            verification_url=f"{self._verification_url_base}/verify-email?token={token}",
        )

        self._logger.info("user_registered", user_id=str(user.id))
        return Success(value=RegistrationResponse(user=UserSummary.from_user(user)))
