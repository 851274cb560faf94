"""Integration tests for BcryptPasswordService.

Uses real bcrypt (cost factor 10 for speed).
"""

import pytest

from workflo_auth.infrastructure.security import BcryptPasswordService


@pytest.fixture
def service() -> BcryptPasswordService:
    return BcryptPasswordService(cost_factor=10)


@pytest.mark.integration
class TestBcryptPasswordService:
    """Hashing and verification with real bcrypt."""

    def test_hash_is_bcrypt_format(self, service):
        password_hash = service.hash_password("SecurePass123!")

        assert password_hash.startswith("$2b$10$")
        assert len(password_hash) == 60

    def test_same_password_hashes_differently(self, service):
        assert service.hash_password("SecurePass123!") != service.hash_password(
            "SecurePass123!"
        )

    def test_verify_correct_password(self, service):
        password_hash = service.hash_password("SecurePass123!")

        assert service.verify_password("SecurePass123!", password_hash) is True

    def test_verify_wrong_password(self, service):
        password_hash = service.hash_password("SecurePass123!")

        assert service.verify_password("WrongPass123!", password_hash) is False

    def test_verify_is_case_sensitive(self, service):
        password_hash = service.hash_password("SecurePass123!")

        assert service.verify_password("securepass123!", password_hash) is False

    def test_verify_empty_inputs_returns_false(self, service):
        password_hash = service.hash_password("SecurePass123!")

        assert service.verify_password("", password_hash) is False
        assert service.verify_password("SecurePass123!", "") is False

    def test_verify_malformed_hash_returns_false(self, service):
        assert service.verify_password("SecurePass123!", "not-a-bcrypt-hash") is False

    def test_unicode_password_round_trip(self, service):
        password_hash = service.hash_password("pässwörd-密码-🔒")

        assert service.verify_password("pässwörd-密码-🔒", password_hash) is True

    def test_password_longer_than_72_bytes(self, service):
        long_password = "a" * 100
        password_hash = service.hash_password(long_password)

        assert service.verify_password(long_password, password_hash) is True

    def test_empty_password_rejected(self, service):
        with pytest.raises(ValueError, match="Password cannot be empty"):
            service.hash_password("")

    @pytest.mark.parametrize("cost_factor", [9, 21])
    def test_cost_factor_bounds(self, cost_factor):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost_factor)
