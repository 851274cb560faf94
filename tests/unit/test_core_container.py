"""Unit tests for the dependency container.

Tests cover:
- Singletons are cached and shared (token store shared by token service)
- Breach backend selection from settings
- OAuth registry only holds configured providers
- bootstrap() fails fast on missing secrets
- reset_container() clears every cache
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError as PydanticValidationError

from workflo_auth.application.cqrs.message_bus import MessageBus
from workflo_auth.core.container import (
    bootstrap,
    get_breach_service,
    get_message_bus,
    get_oauth_registry,
    get_token_service,
    get_user_repository,
    reset_container,
)
from workflo_auth.core.result import Failure, Success
from workflo_auth.infrastructure.security import (
    LocalPasswordBreachService,
    PwnedPasswordsBreachService,
)


@pytest.mark.unit
class TestContainerSingletons:
    """Cached factories."""

    def test_factories_return_singletons(self, auth_env):
        assert get_token_service() is get_token_service()
        assert get_user_repository() is get_user_repository()
        assert get_message_bus() is get_message_bus()

    def test_reset_container_builds_new_instances(self, auth_env):
        first = get_user_repository()

        reset_container()

        assert get_user_repository() is not first

    def test_bootstrap_returns_bus(self, auth_env):
        bus = bootstrap()

        assert isinstance(bus, MessageBus)
        assert bus is get_message_bus()

    def test_bootstrap_fails_without_secret(self):
        with patch.dict(os.environ, {"EMAIL_HASH_SALT": "salt"}, clear=True):
            reset_container()
            try:
                with pytest.raises(PydanticValidationError):
                    bootstrap()
            finally:
                reset_container()


@pytest.mark.unit
class TestContainerSelection:
    """Settings-driven adapter choice."""

    def test_local_breach_backend_by_default(self, auth_env):
        assert isinstance(get_breach_service(), LocalPasswordBreachService)

    def test_pwned_breach_backend(self, auth_env):
        os.environ["BREACH_CHECK_BACKEND"] = "pwned"
        reset_container()

        assert isinstance(get_breach_service(), PwnedPasswordsBreachService)

    def test_no_oauth_providers_without_credentials(self, auth_env):
        registry = get_oauth_registry()

        assert isinstance(registry.get("google"), Failure)
        assert isinstance(registry.get("microsoft"), Failure)

    def test_configured_provider_is_registered(self, auth_env):
        os.environ["GOOGLE_CLIENT_ID"] = "client"
        os.environ["GOOGLE_CLIENT_SECRET"] = "secret"
        reset_container()

        registry = get_oauth_registry()

        assert isinstance(registry.get("google"), Success)
        assert isinstance(registry.get("microsoft"), Failure)
