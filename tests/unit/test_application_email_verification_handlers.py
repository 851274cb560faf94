"""Unit tests for VerifyEmailHandler and ResendVerificationHandler.

Tests cover:
- Token redemption marks the user verified (idempotent per user)
- Token failures pass through unchanged
- Unknown users
- Resend only for unverified accounts
"""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from workflo_auth.application.commands import ResendVerification, VerifyEmail
from workflo_auth.application.commands.handlers import (
    ResendVerificationHandler,
    VerifyEmailHandler,
)
from workflo_auth.core.enums import ErrorCode
from workflo_auth.core.errors import BusinessRuleError, NotFoundError
from workflo_auth.core.result import Failure, Success
from workflo_auth.domain.entities import User
from workflo_auth.domain.errors import TokenError


def create_user(*, verified: bool = False) -> User:
    return User(
        id=uuid7(),
        email_hash="email-hash",
        password_hash="hashed",
        preferred_name="Test User",
        email_verified=verified,
    )


@pytest.mark.unit
class TestVerifyEmailHandler:
    """Verification link redemption."""

    def _handler(self, user: User | None, redeemed):
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user
        verification_tokens = AsyncMock()
        verification_tokens.redeem_token.return_value = redeemed
        handler = VerifyEmailHandler(
            user_repo=user_repo, verification_tokens=verification_tokens, logger=Mock()
        )
        return handler, user_repo

    @pytest.mark.asyncio
    async def test_verifies_user(self):
        # Arrange
        user = create_user()
        handler, user_repo = self._handler(user, Success(value=user.id))

        # Act
        result = await handler.handle(VerifyEmail(token="t"))

        # Assert
        assert isinstance(result, Success)
        assert result.value.message == "Email verified successfully"
        assert user.email_verified is True
        user_repo.save.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_already_verified_user_is_not_saved_again(self):
        user = create_user(verified=True)
        handler, user_repo = self._handler(user, Success(value=user.id))

        result = await handler.handle(VerifyEmail(token="t"))

        assert isinstance(result, Success)
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error", [TokenError.expired(), TokenError.already_used(), TokenError.purpose_invalid()]
    )
    async def test_token_failures_pass_through(self, error):
        failure = Failure(error=error)
        handler, user_repo = self._handler(create_user(), failure)

        result = await handler.handle(VerifyEmail(token="t"))

        assert result is failure
        user_repo.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        handler, _ = self._handler(None, Success(value=uuid7()))

        result = await handler.handle(VerifyEmail(token="t"))

        assert isinstance(result.error, NotFoundError)
        assert result.error.code is ErrorCode.USER_NOT_FOUND


@pytest.mark.unit
class TestResendVerificationHandler:
    """Fresh verification email."""

    def _handler(self, user: User | None):
        user_repo = AsyncMock()
        user_repo.find_by_email_hash.return_value = user
        email_hasher = Mock()
        email_hasher.hash_email.return_value = "email-hash"
        verification_tokens = AsyncMock()
        verification_tokens.generate_token.return_value = "fresh"
        email_service = AsyncMock()
        handler = ResendVerificationHandler(
            user_repo=user_repo,
            email_hasher=email_hasher,
            verification_tokens=verification_tokens,
            email_service=email_service,
            verification_url_base="https://app.workflo.test",
            logger=Mock(),
        )
        return handler, email_service

    @pytest.mark.asyncio
    async def test_sends_new_link(self):
        handler, email_service = self._handler(create_user())

        result = await handler.handle(ResendVerification(email="a@b.com"))

        assert result.value.message == "Verification email sent successfully"
        email_service.send_verification_email.assert_awaited_once_with(
            to_email="a@b.com",
            verification_url="https://app.workflo.test/verify-email?token=fresh",
        )

    @pytest.mark.asyncio
    async def test_already_verified(self):
        handler, email_service = self._handler(create_user(verified=True))

        result = await handler.handle(ResendVerification(email="a@b.com"))

        assert isinstance(result.error, BusinessRuleError)
        assert result.error.code is ErrorCode.BUSINESS_INVALID_USER_STATE
        email_service.send_verification_email.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_email(self):
        handler, email_service = self._handler(None)

        result = await handler.handle(ResendVerification(email="a@b.com"))

        assert isinstance(result.error, NotFoundError)
        email_service.send_verification_email.assert_not_awaited()
