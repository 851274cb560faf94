"""Unit tests for the validation pipeline and message bus.

Tests cover:
- Handler called exactly once for valid messages, never for invalid ones
- All validator failures aggregated and joined with "; "
- Failure shaped by the handler's ResponseShape (Result or UnionResult)
- Pass-through when no validators are registered
- Cancellation propagates and the handler is not called
- A raising validator cancels its siblings and its error propagates
- Bus registration rules (shape required, no duplicates, unknown message)
"""

import asyncio
from dataclasses import dataclass
from typing import ClassVar
from unittest.mock import AsyncMock, Mock

import pytest

from workflo_auth.application.cqrs.message_bus import MessageBus
from workflo_auth.application.cqrs.response_shape import ResponseShape
from workflo_auth.application.validation import (
    ValidationFailure,
    ValidationPipeline,
    ValidatorRegistry,
)
from workflo_auth.core.enums import ErrorCode
from workflo_auth.core.errors import ValidationError
from workflo_auth.core.result import Failure, Success
from workflo_auth.core.union_result import UnionResult


@dataclass(frozen=True, kw_only=True)
class Ping:
    value: str = ""


class StaticValidator:
    """Reports a fixed list of failures."""

    def __init__(self, *failures: ValidationFailure) -> None:
        self._failures = list(failures)

    async def validate(self, message):
        return list(self._failures)


class BlockingValidator:
    """Never completes until cancelled."""

    def __init__(self) -> None:
        self.started = asyncio.Event()
        self.cancelled = False

    async def validate(self, message):
        self.started.set()
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return []


class BrokenValidator:
    async def validate(self, message):
        raise RuntimeError("validator bug")


class PingHandler:
    response_shape: ClassVar[ResponseShape] = ResponseShape.RESULT

    def __init__(self, result=None) -> None:
        self.handle = AsyncMock(return_value=result or Success(value="pong"))


class UnionPingHandler:
    response_shape: ClassVar[ResponseShape] = ResponseShape.UNION

    def __init__(self) -> None:
        self.handle = AsyncMock(return_value=UnionResult.of(1, "pong"))


def _pipeline(registry: ValidatorRegistry) -> ValidationPipeline:
    return ValidationPipeline(registry=registry, logger=Mock())


@pytest.mark.unit
class TestValidationPipeline:
    """Pre-handler validation behavior."""

    @pytest.mark.asyncio
    async def test_failures_are_aggregated_and_handler_not_called(self):
        # Arrange
        registry = ValidatorRegistry()
        registry.register(Ping, StaticValidator(ValidationFailure(message="A required", field="a")))
        registry.register(Ping, StaticValidator(ValidationFailure(message="B too short", field="b")))
        handler = PingHandler()

        # Act
        result = await _pipeline(registry).run(Ping(), handler.handle, ResponseShape.RESULT)

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code is ErrorCode.VALIDATION_FAILED
        assert set(result.error.message.split("; ")) == {"A required", "B too short"}
        assert result.error.field is None
        assert [e["field"] for e in result.error.details["errors"]] == ["a", "b"]
        assert handler.handle.await_count == 0

    @pytest.mark.asyncio
    async def test_single_field_failure_keeps_field(self):
        registry = ValidatorRegistry()
        registry.register(
            Ping, StaticValidator(ValidationFailure(message="Email is required", field="email"))
        )

        result = await _pipeline(registry).run(Ping(), PingHandler().handle, ResponseShape.RESULT)

        assert result.error.field == "email"
        assert result.error.message == "Email is required"

    @pytest.mark.asyncio
    async def test_valid_message_calls_handler_once(self):
        registry = ValidatorRegistry()
        registry.register(Ping, StaticValidator())
        handler = PingHandler()
        message = Ping(value="x")

        result = await _pipeline(registry).run(message, handler.handle, ResponseShape.RESULT)

        assert result == Success(value="pong")
        handler.handle.assert_awaited_once_with(message)

    @pytest.mark.asyncio
    async def test_no_validators_returns_handler_result_verbatim(self):
        sentinel = Failure(error=ValidationError.required("X"))
        handler = PingHandler(result=sentinel)

        result = await _pipeline(ValidatorRegistry()).run(
            Ping(), handler.handle, ResponseShape.RESULT
        )

        assert result is sentinel

    @pytest.mark.asyncio
    async def test_union_shape_failure(self):
        registry = ValidatorRegistry()
        registry.register(Ping, StaticValidator(ValidationFailure(message="A required")))
        handler = UnionPingHandler()

        result = await _pipeline(registry).run(Ping(), handler.handle, ResponseShape.UNION)

        assert isinstance(result, UnionResult)
        assert result.is_failure
        assert result.error.message == "A required"
        handler.handle.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        # Arrange
        registry = ValidatorRegistry()
        blocking = BlockingValidator()
        registry.register(Ping, blocking)
        handler = PingHandler()
        task = asyncio.create_task(
            _pipeline(registry).run(Ping(), handler.handle, ResponseShape.RESULT)
        )
        await blocking.started.wait()

        # Act
        task.cancel()

        # Assert
        with pytest.raises(asyncio.CancelledError):
            await task
        handler.handle.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_raising_validator_cancels_siblings(self):
        # Arrange
        registry = ValidatorRegistry()
        blocking = BlockingValidator()
        registry.register(Ping, blocking)
        registry.register(Ping, BrokenValidator())
        handler = PingHandler()

        # Act
        with pytest.raises(RuntimeError, match="validator bug"):
            await _pipeline(registry).run(Ping(), handler.handle, ResponseShape.RESULT)

        # Assert
        assert blocking.cancelled is True
        handler.handle.assert_not_awaited()


@pytest.mark.unit
class TestMessageBus:
    """Registration and dispatch."""

    @pytest.mark.asyncio
    async def test_dispatch_runs_validators_then_handler(self):
        bus = MessageBus(logger=Mock())
        handler = PingHandler()
        bus.register(Ping, handler, validators=[StaticValidator()])

        result = await bus.dispatch(Ping(value="x"))

        assert result == Success(value="pong")
        handler.handle.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_dispatch_short_circuits_invalid_message(self):
        bus = MessageBus(logger=Mock())
        handler = UnionPingHandler()
        bus.register(
            Ping, handler, validators=[StaticValidator(ValidationFailure(message="bad"))]
        )

        result = await bus.dispatch(Ping())

        assert result.is_failure
        handler.handle.assert_not_awaited()

    def test_handler_without_shape_is_rejected(self):
        bus = MessageBus(logger=Mock())

        class NoShape:
            async def handle(self, message):
                return None

        with pytest.raises(TypeError):
            bus.register(Ping, NoShape())

    def test_duplicate_registration_is_rejected(self):
        bus = MessageBus(logger=Mock())
        bus.register(Ping, PingHandler())

        with pytest.raises(ValueError):
            bus.register(Ping, PingHandler())

    @pytest.mark.asyncio
    async def test_unknown_message_raises(self):
        with pytest.raises(LookupError):
            await MessageBus(logger=Mock()).dispatch(Ping())
