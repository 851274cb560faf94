"""RefreshToken command handler (rotation).

Flow:
1. Validate the refresh token (signature, claims, expiry, type)
2. Confirm it is still active for its subject
3. Load the user; it must exist and be active
4. Revoke the presented token; losing a concurrent rotation fails
5. Issue a new access/refresh pair
6. Return Success(AuthTokens)

A refresh token therefore mints at most one new pair.
"""

from typing import ClassVar

from workflo_auth.application.commands.auth_commands import RefreshToken
from workflo_auth.application.commands.handlers.token_issuance import issue_tokens
from workflo_auth.application.cqrs.response_shape import ResponseShape
from workflo_auth.application.dtos import AuthTokens
from workflo_auth.core.enums import ErrorCode
from workflo_auth.core.errors import AuthenticationError, DomainError
from workflo_auth.core.result import Failure, Result, Success
from workflo_auth.domain.enums import TokenType
from workflo_auth.domain.errors import TokenError
from workflo_auth.domain.protocols import (
    LoggerProtocol,
    TokenServiceProtocol,
    UserRepository,
)

USER_UNAVAILABLE_MESSAGE = "User not found or inactive"


class RefreshTokenHandler:
    """Exchange a refresh token for a new token pair."""

    response_shape: ClassVar[ResponseShape] = ResponseShape.RESULT

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        token_service: TokenServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: RefreshToken) -> Result[AuthTokens, DomainError]:
        """Rotate a refresh token.

        Returns:
            Success(AuthTokens) with a fresh pair.
            Failure(TokenError) for invalid, expired or revoked tokens.
            Failure(AuthenticationError) if the user is gone or inactive.
        """
        validated = await self._token_service.validate_token(
            cmd.refresh_token, token_type=TokenType.REFRESH
        )
        if isinstance(validated, Failure):
            self._logger.info("token_refresh_failed", reason=validated.error.code.value)
            return validated
        user_id = validated.value.user_id

        if not await self._token_service.validate_refresh_token(cmd.refresh_token, user_id):
            self._logger.info("token_refresh_failed", reason="revoked", user_id=str(user_id))
            return Failure(error=TokenError.revoked())

        user = await self._user_repo.find_by_id(user_id)
        if user is None or not user.is_active:
            self._logger.info("token_refresh_failed", reason="user_unavailable", user_id=str(user_id))
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message=USER_UNAVAILABLE_MESSAGE,
                )
            )

        if not await self._token_service.revoke_refresh_token(cmd.refresh_token):
            self._logger.warning("token_refresh_race_lost", user_id=str(user_id))
            return Failure(error=TokenError.revoked())

        tokens = await issue_tokens(self._token_service, user, remember_me=cmd.remember_me)
        self._logger.info("token_refreshed", user_id=str(user_id))
        return Success(value=tokens)
