"""Validation pipeline: validators, registry and the pre-handler behavior."""

from workflo_auth.application.validation.pipeline import ValidationPipeline
from workflo_auth.application.validation.pydantic_validator import (
    PydanticMessageValidator,
)
from workflo_auth.application.validation.registry import ValidatorRegistry
from workflo_auth.application.validation.validator import (
    MessageValidator,
    ValidationFailure,
)

__all__ = [
    "MessageValidator",
    "PydanticMessageValidator",
    "ValidationFailure",
    "ValidationPipeline",
    "ValidatorRegistry",
]
