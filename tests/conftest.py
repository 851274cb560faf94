"""Shared pytest fixtures.

Fixtures:
- secret_key: HMAC secret long enough for every token service
- auth_env: minimal environment for ``Settings`` with a clean container
- fixed_clock: controllable clock for token services
"""

import os
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import pytest

from workflo_auth.core.container import reset_container

TEST_SECRET_KEY = "test-secret-key-that-is-at-least-32-bytes-long"
TEST_EMAIL_SALT = "test-email-salt"


class MutableClock:
    """Clock whose "now" only moves when a test moves it."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


@pytest.fixture
def secret_key() -> str:
    return TEST_SECRET_KEY


@pytest.fixture
def fixed_clock() -> MutableClock:
    return MutableClock(datetime(2026, 1, 15, 12, 0, 0, tzinfo=UTC))


@pytest.fixture
def auth_env() -> Iterator[dict[str, str]]:
    """Environment for Settings plus a container reset before and after."""
    env = {
        "JWT_SECRET_KEY": TEST_SECRET_KEY,
        "EMAIL_HASH_SALT": TEST_EMAIL_SALT,
        "ENVIRONMENT": "testing",
        "BCRYPT_ROUNDS": "10",
        "VERIFICATION_URL_BASE": "https://app.workflo.test",
    }
    with patch.dict(os.environ, env, clear=True):
        reset_container()
        yield env
        reset_container()
