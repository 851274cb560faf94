"""Unit tests for ConsoleAdapter and the redaction processor.

Tests cover:
- LoggerProtocol methods delegate to structlog with structured context
- error()/critical() attach exception type and message
- bind() returns a new adapter, original unchanged
- Sensitive keys are masked (top level and one level nested)

Architecture:
- Unit tests with mocked structlog
"""

from unittest.mock import MagicMock, patch

import pytest

from workflo_auth.infrastructure.logging import ConsoleAdapter, redact_sensitive_values
from workflo_auth.infrastructure.logging.redaction import REDACTED

STRUCTLOG_PATH = "workflo_auth.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_level_methods_pass_context(self, level):
        with patch(STRUCTLOG_PATH) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("user_logged_in", user_id="123")

            getattr(mock_logger, level).assert_called_once_with(
                "user_logged_in", user_id="123"
            )

    def test_error_includes_exception_details(self):
        """Test error() adds error_type and error_message."""
        with patch(STRUCTLOG_PATH) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("save_failed", error=RuntimeError("disk full"), user_id="u1")

            mock_logger.error.assert_called_once_with(
                "save_failed",
                user_id="u1",
                error_type="RuntimeError",
                error_message="disk full",
            )

    def test_critical_without_exception(self):
        with patch(STRUCTLOG_PATH) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("store_unavailable")

            mock_logger.critical.assert_called_once_with("store_unavailable")

    def test_bind_returns_new_adapter(self):
        """Test bind() leaves the original adapter unchanged."""
        with patch(STRUCTLOG_PATH) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.with_context(trace_id="t1")
            bound.info("token_refreshed")

            assert bound is not adapter
            assert isinstance(bound, ConsoleAdapter)
            mock_logger.bind.assert_called_once_with(trace_id="t1")
            bound_logger.info.assert_called_once_with("token_refreshed")
            mock_logger.info.assert_not_called()

    @pytest.mark.parametrize("use_json", [True, False])
    def test_renderer_selection(self, use_json):
        with patch(STRUCTLOG_PATH) as mock_structlog:
            ConsoleAdapter(use_json=use_json)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert redact_sensitive_values in processors
            if use_json:
                assert mock_structlog.processors.JSONRenderer.return_value in processors
            else:
                assert mock_structlog.dev.ConsoleRenderer.return_value in processors


@pytest.mark.unit
class TestRedaction:
    """Sensitive values never reach the renderer."""

    def test_sensitive_keys_are_masked(self):
        event = {
            "event": "login_failed",
            "password": "hunter2",
            "Access_Token": "eyJ...",
            "client_secret": "s",
            "email": "a@b.com",
            "user_id": "u1",
        }

        result = redact_sensitive_values(None, "info", event)

        assert result["password"] == REDACTED
        assert result["Access_Token"] == REDACTED
        assert result["client_secret"] == REDACTED
        assert result["email"] == REDACTED
        assert result["user_id"] == "u1"
        assert result["event"] == "login_failed"

    def test_nested_dict_is_scanned(self):
        event = {"event": "x", "details": {"refresh_token": "rt", "status": 400}}

        result = redact_sensitive_values(None, "info", event)

        assert result["details"] == {"refresh_token": REDACTED, "status": 400}
