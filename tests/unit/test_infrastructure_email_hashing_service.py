"""Unit tests for EmailHashingService."""

import base64
import hashlib

import pytest

from workflo_auth.infrastructure.security import EmailHashingService


@pytest.mark.unit
class TestEmailHashingService:
    """Salted, normalized email hashing."""

    def test_hash_is_base64_sha256_of_normalized_email_and_salt(self):
        service = EmailHashingService("pepper")
        expected = base64.b64encode(
            hashlib.sha256(b"user@example.compepper").digest()
        ).decode("ascii")

        assert service.hash_email("  User@Example.COM ") == expected

    def test_hash_is_deterministic_and_case_insensitive(self):
        service = EmailHashingService("pepper")

        assert service.hash_email("a@b.com") == service.hash_email("A@B.COM")

    def test_different_salts_give_different_hashes(self):
        assert EmailHashingService("one").hash_email("a@b.com") != (
            EmailHashingService("two").hash_email("a@b.com")
        )

    def test_hash_does_not_contain_plaintext(self):
        digest = EmailHashingService("pepper").hash_email("someone@example.com")

        assert "someone" not in digest
        assert "example" not in digest

    def test_verify_email(self):
        service = EmailHashingService("pepper")
        email_hash = service.hash_email("a@b.com")

        assert service.verify_email("A@b.com", email_hash) is True
        assert service.verify_email("c@d.com", email_hash) is False
        assert service.verify_email("a@b.com", "") is False

    @pytest.mark.parametrize("email", ["", "   "])
    def test_empty_email_rejected(self, email):
        with pytest.raises(ValueError):
            EmailHashingService("pepper").hash_email(email)

    def test_empty_salt_rejected(self):
        with pytest.raises(ValueError):
            EmailHashingService("")
