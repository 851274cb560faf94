"""GetCurrentUser query handler.

Resolves the account behind an access token. Refresh tokens are rejected
(TOKEN_TYPE_INVALID).
"""

from typing import ClassVar

from workflo_auth.application.cqrs.response_shape import ResponseShape
from workflo_auth.application.dtos import UserSummary
from workflo_auth.application.queries.auth_queries import GetCurrentUser
from workflo_auth.core.enums import ErrorCode
from workflo_auth.core.errors import AuthorizationError, DomainError, NotFoundError
from workflo_auth.core.result import Failure, Result, Success
from workflo_auth.domain.enums import TokenType
from workflo_auth.domain.protocols import TokenServiceProtocol, UserRepository


class GetCurrentUserHandler:
    response_shape: ClassVar[ResponseShape] = ResponseShape.RESULT

    def __init__(
        self, *, user_repo: UserRepository, token_service: TokenServiceProtocol
    ) -> None:
        self._user_repo = user_repo
        self._token_service = token_service

    async def handle(self, query: GetCurrentUser) -> Result[UserSummary, DomainError]:
        """Return the current user's summary.

        Returns:
            Success(UserSummary).
            Failure(TokenError) for an invalid access token.
            Failure(NotFoundError) if the user no longer exists.
            Failure(AuthorizationError) if the account is deactivated.
        """
        validated = await self._token_service.validate_token(
            query.access_token, token_type=TokenType.ACCESS
        )
        if isinstance(validated, Failure):
            return validated
        user_id = validated.value.user_id

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(user_id),
                )
            )
        if not user.is_active:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.ACCOUNT_DEACTIVATED,
                    message="User account is deactivated",
                )
            )

        return Success(value=UserSummary.from_user(user))
