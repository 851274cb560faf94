"""Integration tests for JWTCodec (real PyJWT signing and verification).

Tests cover:
- Check order: required, malformed, signature, claims, issuer, audience, expiry
- Zero-skew expiry at millisecond precision (freezegun)
- Secret length enforcement
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from freezegun import freeze_time

from workflo_auth.core.enums import ErrorCode
from workflo_auth.core.result import Failure, Success
from workflo_auth.infrastructure.security import JWTCodec

ISSUED_AT = datetime(2026, 1, 15, 12, 0, 0, tzinfo=UTC)
OTHER_SECRET = "another-secret-key-with-32-bytes-or-more"


@pytest.fixture
def codec(secret_key) -> JWTCodec:
    return JWTCodec(secret_key=secret_key, issuer="WorkFlo", audience="WorkFlo")


@pytest.mark.integration
class TestJWTCodecEncoding:
    """Token construction."""

    def test_encode_writes_standard_claims(self, codec, secret_key):
        # Arrange / Act
        with freeze_time(ISSUED_AT):
            token, expires_at = codec.encode(
                {"sub": "u1", "jti": "j1"}, expires_in=timedelta(minutes=5)
            )

        # Assert
        payload = jwt.decode(
            token,
            secret_key,
            algorithms=["HS256"],
            options={"verify_exp": False, "verify_aud": False},
        )
        assert payload["iss"] == "WorkFlo"
        assert payload["aud"] == "WorkFlo"
        assert payload["iat"] == int(ISSUED_AT.timestamp())
        assert payload["exp"] == (ISSUED_AT + timedelta(minutes=5)).timestamp()
        assert expires_at == ISSUED_AT + timedelta(minutes=5)

    def test_header_uses_hs256(self, codec):
        token, _ = codec.encode({"sub": "u1", "jti": "j1"}, expires_in=timedelta(minutes=5))

        assert jwt.get_unverified_header(token)["alg"] == "HS256"


@pytest.mark.integration
class TestJWTCodecDecoding:
    """Failure classification."""

    def test_valid_token_decodes(self, codec):
        token, _ = codec.encode({"sub": "u1", "jti": "j1"}, expires_in=timedelta(minutes=5))

        result = codec.decode(token)

        assert isinstance(result, Success)
        assert result.value["sub"] == "u1"

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_missing_token_is_required(self, codec, token):
        result = codec.decode(token)

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.TOKEN_REQUIRED

    @pytest.mark.parametrize("token", ["not-a-jwt", "a.b", "a.b.c"])
    def test_garbage_is_malformed(self, codec, token):
        result = codec.decode(token)

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.TOKEN_MALFORMED

    def test_wrong_key_is_signature_invalid(self, codec):
        other = JWTCodec(secret_key=OTHER_SECRET, issuer="WorkFlo", audience="WorkFlo")
        token, _ = other.encode({"sub": "u1", "jti": "j1"}, expires_in=timedelta(minutes=5))

        result = codec.decode(token)

        assert result.error.code is ErrorCode.TOKEN_SIGNATURE_INVALID

    def test_tampered_payload_is_signature_invalid(self, codec):
        token, _ = codec.encode({"sub": "u1", "jti": "j1"}, expires_in=timedelta(minutes=5))
        forged, _ = codec.encode({"sub": "u2", "jti": "j1"}, expires_in=timedelta(minutes=5))
        header, _, signature = token.split(".")
        tampered = f"{header}.{forged.split('.')[1]}.{signature}"

        result = codec.decode(tampered)

        assert result.error.code is ErrorCode.TOKEN_SIGNATURE_INVALID

    def test_other_algorithm_is_signature_invalid(self, codec, secret_key):
        token = jwt.encode(
            {"sub": "u1", "jti": "j1", "iss": "WorkFlo", "aud": "WorkFlo", "exp": 9999999999},
            secret_key,
            algorithm="HS512",
        )

        result = codec.decode(token)

        assert result.error.code is ErrorCode.TOKEN_SIGNATURE_INVALID

    def test_wrong_issuer(self, codec, secret_key):
        other = JWTCodec(secret_key=secret_key, issuer="Elsewhere", audience="WorkFlo")
        token, _ = other.encode({"sub": "u1", "jti": "j1"}, expires_in=timedelta(minutes=5))

        assert codec.decode(token).error.code is ErrorCode.TOKEN_ISSUER_INVALID

    def test_wrong_audience(self, codec, secret_key):
        other = JWTCodec(secret_key=secret_key, issuer="WorkFlo", audience="Elsewhere")
        token, _ = other.encode({"sub": "u1", "jti": "j1"}, expires_in=timedelta(minutes=5))

        assert codec.decode(token).error.code is ErrorCode.TOKEN_AUDIENCE_INVALID

    def test_missing_required_claim(self, codec):
        token, _ = codec.encode({"sub": "u1"}, expires_in=timedelta(minutes=5))

        assert codec.decode(token, required=("sub", "jti")).error.code is (
            ErrorCode.TOKEN_CLAIMS_INVALID
        )

    def test_signature_checked_before_expiry(self, secret_key):
        other = JWTCodec(secret_key=OTHER_SECRET, issuer="WorkFlo", audience="WorkFlo")
        codec = JWTCodec(secret_key=secret_key, issuer="WorkFlo", audience="WorkFlo")
        token, _ = other.encode({"sub": "u1", "jti": "j1"}, expires_in=timedelta(minutes=-5))

        assert codec.decode(token).error.code is ErrorCode.TOKEN_SIGNATURE_INVALID


@pytest.mark.integration
class TestJWTCodecExpiry:
    """Zero clock skew at millisecond precision."""

    def _token(self, codec) -> str:
        with freeze_time(ISSUED_AT):
            token, _ = codec.encode({"sub": "u1", "jti": "j1"}, expires_in=timedelta(seconds=60))
        return token

    def test_valid_one_millisecond_before_expiry(self, codec):
        token = self._token(codec)

        with freeze_time(ISSUED_AT + timedelta(seconds=60) - timedelta(milliseconds=1)):
            result = codec.decode(token)

        assert isinstance(result, Success)

    def test_expired_exactly_at_expiry(self, codec):
        token = self._token(codec)

        with freeze_time(ISSUED_AT + timedelta(seconds=60)):
            result = codec.decode(token)

        assert result.error.code is ErrorCode.TOKEN_EXPIRED

    def test_expired_one_millisecond_after_expiry(self, codec):
        token = self._token(codec)

        with freeze_time(ISSUED_AT + timedelta(seconds=60, milliseconds=1)):
            result = codec.decode(token)

        assert result.error.code is ErrorCode.TOKEN_EXPIRED

    def test_expiry_check_can_be_skipped(self, codec):
        token = self._token(codec)

        with freeze_time(ISSUED_AT + timedelta(days=1)):
            result = codec.decode(token, verify_expiry=False)

        assert isinstance(result, Success)

    def test_injected_clock_is_used(self, secret_key, fixed_clock):
        codec = JWTCodec(
            secret_key=secret_key, issuer="WorkFlo", audience="WorkFlo", clock=fixed_clock
        )
        token, expires_at = codec.encode({"sub": "u1", "jti": "j1"}, expires_in=timedelta(minutes=1))

        fixed_clock.advance(timedelta(minutes=1))

        assert expires_at == fixed_clock()
        assert codec.decode(token).error.code is ErrorCode.TOKEN_EXPIRED


@pytest.mark.integration
class TestJWTCodecSecret:
    """Signing secret requirements."""

    @pytest.mark.parametrize("secret", ["", "x" * 31])
    def test_short_or_missing_secret_rejected(self, secret):
        with pytest.raises(ValueError):
            JWTCodec(secret_key=secret, issuer="WorkFlo", audience="WorkFlo")

    def test_32_byte_secret_accepted(self):
        JWTCodec(secret_key="x" * 32, issuer="WorkFlo", audience="WorkFlo")
