"""VerifyEmail command handler.

Flow:
1. Redeem the verification token (validates and marks it used)
2. Load the user named by the token
3. Mark the email verified (no-op if already verified)
4. Return Success(MessageResponse)

A token can be redeemed once; a replay fails with TOKEN_ALREADY_USED.
"""

from typing import ClassVar

from workflo_auth.application.commands.auth_commands import VerifyEmail
from workflo_auth.application.cqrs.response_shape import ResponseShape
from workflo_auth.application.dtos import MessageResponse
from workflo_auth.core.enums import ErrorCode
from workflo_auth.core.errors import DomainError, NotFoundError
from workflo_auth.core.result import Failure, Result, Success
from workflo_auth.domain.protocols import (
    EmailVerificationTokenProtocol,
    LoggerProtocol,
    UserRepository,
)

VERIFIED_MESSAGE = "Email verified successfully"
USER_NOT_FOUND_MESSAGE = "User not found"


class VerifyEmailHandler:
    response_shape: ClassVar[ResponseShape] = ResponseShape.RESULT

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        verification_tokens: EmailVerificationTokenProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._verification_tokens = verification_tokens
        self._logger = logger

    async def handle(self, cmd: VerifyEmail) -> Result[MessageResponse, DomainError]:
        """Verify a user's email address.

        Returns:
            Success(MessageResponse) once verified (idempotent per user).
            Failure(TokenError) if the token is invalid, expired or used.
            Failure(NotFoundError) if the user no longer exists.
        """
        redeemed = await self._verification_tokens.redeem_token(cmd.token)
        if isinstance(redeemed, Failure):
            self._logger.info("email_verification_failed", reason=redeemed.error.code.value)
            return redeemed
        user_id = redeemed.value

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message=USER_NOT_FOUND_MESSAGE,
                    resource_type="User",
                    resource_id=str(user_id),
                )
            )

        if not user.email_verified:
            user.mark_email_verified()
            await self._user_repo.save(user)
            self._logger.info("email_verified", user_id=str(user_id))

        return Success(value=MessageResponse(message=VERIFIED_MESSAGE))
