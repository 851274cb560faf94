"""ValidateRefreshToken query handler.

Read-only: reports whether a refresh token could be used right now
without rotating or revoking it.
"""

from typing import ClassVar

from workflo_auth.application.cqrs.response_shape import ResponseShape
from workflo_auth.application.dtos import RefreshTokenStatus
from workflo_auth.application.queries.auth_queries import ValidateRefreshToken
from workflo_auth.core.errors import DomainError
from workflo_auth.core.result import Failure, Result, Success
from workflo_auth.domain.enums import TokenType
from workflo_auth.domain.errors import TokenError
from workflo_auth.domain.protocols import TokenServiceProtocol


class ValidateRefreshTokenHandler:
    response_shape: ClassVar[ResponseShape] = ResponseShape.RESULT

    def __init__(self, *, token_service: TokenServiceProtocol) -> None:
        self._token_service = token_service

    async def handle(
        self, query: ValidateRefreshToken
    ) -> Result[RefreshTokenStatus, DomainError]:
        validated = await self._token_service.validate_token(
            query.refresh_token, token_type=TokenType.REFRESH
        )
        if isinstance(validated, Failure):
            return validated
        claims = validated.value

        if not await self._token_service.validate_refresh_token(
            query.refresh_token, claims.user_id
        ):
            return Failure(error=TokenError.revoked())

        return Success(
            value=RefreshTokenStatus(
                user_id=claims.user_id, is_valid=True, expires_at=claims.expires_at
            )
        )
