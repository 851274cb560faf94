"""Integration tests for EmailVerificationTokenService.

Tests cover:
- Round trip (generate -> validate -> user id)
- Distinct failure kinds in check order
- Single use through the used-token ledger
"""

from datetime import timedelta

import jwt
import pytest
from uuid_extensions import uuid7

from workflo_auth.core.enums import ErrorCode
from workflo_auth.core.result import Failure, Success
from workflo_auth.infrastructure.persistence import (
    InMemoryRefreshTokenStore,
    InMemoryUsedTokenStore,
)
from workflo_auth.infrastructure.security import (
    EmailVerificationTokenService,
    JWTService,
)


@pytest.fixture
def service(secret_key, fixed_clock) -> EmailVerificationTokenService:
    return EmailVerificationTokenService(
        secret_key=secret_key,
        used_token_store=InMemoryUsedTokenStore(),
        clock=fixed_clock,
    )


@pytest.mark.integration
class TestVerificationTokenValidation:
    """Stateless validation."""

    @pytest.mark.asyncio
    async def test_round_trip_returns_user_id(self, service):
        user_id = uuid7()

        token = await service.generate_token(user_id)
        result = await service.validate_token(token)

        assert result == Success(value=user_id)

    @pytest.mark.asyncio
    async def test_token_is_purpose_scoped(self, service):
        token = await service.generate_token(uuid7())

        payload = jwt.decode(token, options={"verify_signature": False})

        assert payload["purpose"] == "email_verification"
        assert "jti" in payload

    @pytest.mark.asyncio
    async def test_validate_does_not_consume(self, service):
        token = await service.generate_token(uuid7())

        await service.validate_token(token)
        result = await service.validate_token(token)

        assert isinstance(result, Success)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("token", "code"),
        [
            ("", ErrorCode.TOKEN_REQUIRED),
            ("not.a.jwt", ErrorCode.TOKEN_MALFORMED),
        ],
    )
    async def test_structural_failures(self, service, token, code):
        result = await service.validate_token(token)

        assert isinstance(result, Failure)
        assert result.error.code is code

    @pytest.mark.asyncio
    async def test_expires_after_24_hours(self, service, fixed_clock):
        token = await service.generate_token(uuid7())

        fixed_clock.advance(timedelta(hours=24))

        assert (await service.validate_token(token)).error.code is ErrorCode.TOKEN_EXPIRED

    @pytest.mark.asyncio
    async def test_valid_just_before_expiry(self, service, fixed_clock):
        token = await service.generate_token(uuid7())

        fixed_clock.advance(timedelta(hours=24) - timedelta(milliseconds=1))

        assert isinstance(await service.validate_token(token), Success)

    @pytest.mark.asyncio
    async def test_wrong_signature(self, service, fixed_clock):
        other = EmailVerificationTokenService(
            secret_key="another-secret-key-with-32-bytes-or-more", clock=fixed_clock
        )
        token = await other.generate_token(uuid7())

        assert (await service.validate_token(token)).error.code is (
            ErrorCode.TOKEN_SIGNATURE_INVALID
        )

    @pytest.mark.asyncio
    async def test_wrong_issuer_and_audience(self, secret_key, service, fixed_clock):
        wrong_iss = EmailVerificationTokenService(
            secret_key=secret_key, issuer="Other", clock=fixed_clock
        )
        wrong_aud = EmailVerificationTokenService(
            secret_key=secret_key, audience="Other", clock=fixed_clock
        )

        iss_result = await service.validate_token(await wrong_iss.generate_token(uuid7()))
        aud_result = await service.validate_token(await wrong_aud.generate_token(uuid7()))

        assert iss_result.error.code is ErrorCode.TOKEN_ISSUER_INVALID
        assert aud_result.error.code is ErrorCode.TOKEN_AUDIENCE_INVALID

    @pytest.mark.asyncio
    async def test_access_token_has_wrong_purpose(self, secret_key, service, fixed_clock):
        jwt_service = JWTService(
            secret_key=secret_key,
            refresh_token_store=InMemoryRefreshTokenStore(),
            clock=fixed_clock,
        )
        access_token = await jwt_service.generate_access_token(uuid7(), "h")

        result = await service.validate_token(access_token)

        assert result.error.code is ErrorCode.TOKEN_PURPOSE_INVALID


@pytest.mark.integration
class TestVerificationTokenRedemption:
    """Single-use redemption."""

    @pytest.mark.asyncio
    async def test_first_redemption_succeeds(self, service):
        user_id = uuid7()
        token = await service.generate_token(user_id)

        assert await service.redeem_token(token) == Success(value=user_id)

    @pytest.mark.asyncio
    async def test_replay_is_rejected(self, service):
        # Arrange
        token = await service.generate_token(uuid7())
        await service.redeem_token(token)

        # Act
        replay = await service.redeem_token(token)

        # Assert
        assert isinstance(replay, Failure)
        assert replay.error.code is ErrorCode.TOKEN_ALREADY_USED

    @pytest.mark.asyncio
    async def test_each_token_redeems_independently(self, service):
        user_id = uuid7()
        first = await service.generate_token(user_id)
        second = await service.generate_token(user_id)

        assert isinstance(await service.redeem_token(first), Success)
        assert isinstance(await service.redeem_token(second), Success)

    @pytest.mark.asyncio
    async def test_without_ledger_redeem_only_validates(self, secret_key, fixed_clock):
        service = EmailVerificationTokenService(secret_key=secret_key, clock=fixed_clock)
        token = await service.generate_token(uuid7())

        assert isinstance(await service.redeem_token(token), Success)
        assert isinstance(await service.redeem_token(token), Success)
