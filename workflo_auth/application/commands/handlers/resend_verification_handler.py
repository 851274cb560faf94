"""ResendVerification command handler.

Flow:
1. Find user by email hash
2. Reject unknown users and already verified users
3. Generate a new verification token and send the email
"""

from typing import ClassVar

from workflo_auth.application.commands.auth_commands import ResendVerification
from workflo_auth.application.cqrs.response_shape import ResponseShape
from workflo_auth.application.dtos import MessageResponse
from workflo_auth.core.enums import ErrorCode
from workflo_auth.core.errors import BusinessRuleError, DomainError, NotFoundError
from workflo_auth.core.result import Failure, Result, Success
from workflo_auth.domain.protocols import (
    EmailHashingProtocol,
    EmailServiceProtocol,
    EmailVerificationTokenProtocol,
    LoggerProtocol,
    UserRepository,
)

SENT_MESSAGE = "Verification email sent successfully"
ALREADY_VERIFIED_MESSAGE = "Email is already verified"


class ResendVerificationHandler:
    """Re-send the verification link to an unverified account."""

    response_shape: ClassVar[ResponseShape] = ResponseShape.RESULT

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        email_hasher: EmailHashingProtocol,
        verification_tokens: EmailVerificationTokenProtocol,
        email_service: EmailServiceProtocol,
        verification_url_base: str,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._email_hasher = email_hasher
        self._verification_tokens = verification_tokens
        self._email_service = email_service
        self._verification_url_base = verification_url_base.rstrip("/")
        self._logger = logger

    async def handle(
        self, cmd: ResendVerification
    ) -> Result[MessageResponse, DomainError]:
        user = await self._user_repo.find_by_email_hash(
            self._email_hasher.hash_email(cmd.email)
        )
        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                )
            )

        if user.email_verified:
            return Failure(error=BusinessRuleError.invalid_user_state(ALREADY_VERIFIED_MESSAGE))

        token = await self._verification_tokens.generate_token(user.id)
        await self._email_service.send_verification_email(
            to_email=cmd.email,
            verification_url=f"{self._verification_url_base}/verify-email?token={token}",
        )

        self._logger.info("verification_email_resent", user_id=str(user.id))
        return Success(value=MessageResponse(message=SENT_MESSAGE))
