"""Validation pipeline run before every command and query handler.

Behavior:
1. Look up the validators registered for the message's type.
2. None registered: call the handler and return its result verbatim.
3. Otherwise run every validator concurrently in an ``asyncio.TaskGroup``
   so each one reports, and aggregate all failures. A validator that raises
   cancels its siblings and its exception propagates.
4. Any failure: join the messages with ``"; "`` into one ValidationError and
   return it in the handler's declared ResponseShape. The handler is never
   called.

Cancelling the awaiting task cancels the pending validators and propagates
``asyncio.CancelledError``; the handler is not called.

Order of messages in the joined string follows registration order, but
callers must not rely on it.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from workflo_auth.application.cqrs.response_shape import ResponseShape
from workflo_auth.application.validation.registry import ValidatorRegistry
from workflo_auth.application.validation.validator import ValidationFailure
from workflo_auth.core.enums import ErrorCode
from workflo_auth.core.errors import ValidationError
from workflo_auth.domain.protocols import LoggerProtocol

R = TypeVar("R")

FAILURE_SEPARATOR = "; "


class ValidationPipeline:
    """Decides whether a message may reach its handler.

    Args:
        registry: Validators per message type.
        logger: Structured logger.
    """

    def __init__(self, *, registry: ValidatorRegistry, logger: LoggerProtocol) -> None:
        self._registry = registry
        self._logger = logger

    async def run(
        self,
        message: Any,
        handler: Callable[[Any], Awaitable[R]],
        shape: ResponseShape,
    ) -> R | Any:
        """Validate ``message`` and call ``handler`` only if it is valid.

        Args:
            message: Command or query instance.
            handler: Coroutine function handling the message.
            shape: Shape of the handler's response.

        Returns:
            The handler's result, or a failure of ``shape`` carrying a
            ValidationError (code VALIDATION_FAILED).
        """
        message_name = type(message).__name__
        validators = self._registry.validators_for(type(message))
        if not validators:
            return await handler(message)

        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(v.validate(message)) for v in validators]
        except ExceptionGroup as errors:
            # Siblings are already cancelled and awaited by the group.
            raise errors.exceptions[0] from errors
        failures = [failure for task in tasks for failure in task.result()]

        if not failures:
            return await handler(message)

        self._logger.info(
            "message_validation_failed",
            message_type=message_name,
            failure_count=len(failures),
            fields=sorted({f.field for f in failures if f.field}),
        )
        return shape.failure(_to_error(failures))


def _to_error(failures: list[ValidationFailure]) -> ValidationError:
    fields = {f.field for f in failures}
    return ValidationError(
        code=ErrorCode.VALIDATION_FAILED,
        message=FAILURE_SEPARATOR.join(f.message for f in failures),
        field=fields.pop() if len(fields) == 1 else None,
        details={
            "errors": [
                {"field": f.field, "code": f.code, "message": f.message}
                for f in failures
            ]
        },
    )
