"""LogoutUser command handler.

Revokes the refresh token so no new access tokens can be minted from it.
Access tokens are stateless and stay valid until they expire.

Logout always succeeds: an unknown, malformed or already revoked token
leaves nothing to revoke.
"""

from typing import ClassVar

from workflo_auth.application.commands.auth_commands import LogoutUser
from workflo_auth.application.cqrs.response_shape import ResponseShape
from workflo_auth.application.dtos import MessageResponse
from workflo_auth.core.errors import DomainError
from workflo_auth.core.result import Result, Success
from workflo_auth.domain.protocols import LoggerProtocol, TokenServiceProtocol

LOGOUT_MESSAGE = "Logged out successfully"


class LogoutUserHandler:
    response_shape: ClassVar[ResponseShape] = ResponseShape.RESULT

    def __init__(
        self, *, token_service: TokenServiceProtocol, logger: LoggerProtocol
    ) -> None:
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LogoutUser) -> Result[MessageResponse, DomainError]:
        revoked = await self._token_service.revoke_refresh_token(cmd.refresh_token)
        self._logger.info("user_logged_out", token_revoked=revoked)
        return Success(value=MessageResponse(message=LOGOUT_MESSAGE))
