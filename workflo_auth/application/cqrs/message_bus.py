"""Message bus: validation pipeline plus handler dispatch.

Every command and query goes through ``dispatch``:

    message -> ValidationPipeline -> handler.handle(message)

Handlers declare ``response_shape`` (a ResponseShape) as a class attribute;
registration rejects handlers that do not.
"""

from collections.abc import Iterable
from typing import Any, Protocol

from workflo_auth.application.cqrs.response_shape import ResponseShape
from workflo_auth.application.validation.pipeline import ValidationPipeline
from workflo_auth.application.validation.registry import ValidatorRegistry
from workflo_auth.application.validation.validator import MessageValidator
from workflo_auth.domain.protocols import LoggerProtocol


class MessageHandler(Protocol):
    """Anything with a declared response shape and an async ``handle``."""

    response_shape: ResponseShape

    async def handle(self, message: Any) -> Any:
        ...


class MessageBus:
    """Routes messages to handlers through the validation pipeline.

    Example:
        >>> bus = MessageBus(logger=logger)
        >>> bus.register(LoginUser, login_handler, validators=[login_user_validator])
        >>> result = await bus.dispatch(LoginUser(email=..., password=...))
    """

    def __init__(
        self,
        *,
        logger: LoggerProtocol,
        registry: ValidatorRegistry | None = None,
    ) -> None:
        self._registry = registry or ValidatorRegistry()
        self._pipeline = ValidationPipeline(registry=self._registry, logger=logger)
        self._handlers: dict[type, MessageHandler] = {}
        self._logger = logger

    def register(
        self,
        message_type: type,
        handler: MessageHandler,
        *,
        validators: Iterable[MessageValidator] = (),
    ) -> None:
        """Register the handler (and its validators) for a message type.

        Raises:
            TypeError: If the handler does not declare a ResponseShape.
            ValueError: If a handler is already registered for the type.
        """
        if not isinstance(getattr(handler, "response_shape", None), ResponseShape):
            raise TypeError(
                f"{type(handler).__name__} must declare a ResponseShape response_shape"
            )
        if message_type in self._handlers:
            raise ValueError(f"Handler already registered for {message_type.__name__}")

        self._handlers[message_type] = handler
        for validator in validators:
            self._registry.register(message_type, validator)

    async def dispatch(self, message: Any) -> Any:
        """Validate and handle a message.

        Raises:
            LookupError: If no handler is registered for the message type.
        """
        handler = self._handlers.get(type(message))
        if handler is None:
            raise LookupError(f"No handler registered for {type(message).__name__}")

        return await self._pipeline.run(message, handler.handle, handler.response_shape)
