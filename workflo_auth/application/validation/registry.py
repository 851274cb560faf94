"""Validator registry keyed by message type."""

from collections import defaultdict
from typing import Any

from workflo_auth.application.validation.validator import MessageValidator


class ValidatorRegistry:
    """Holds the validators registered for each command and query type.

    Example:
        >>> registry = ValidatorRegistry()
        >>> registry.register(RegisterUser, register_user_validator)
        >>> registry.validators_for(RegisterUser)
        [register_user_validator]
    """

    def __init__(self) -> None:
        self._validators: defaultdict[type, list[MessageValidator]] = defaultdict(list)

    def register(self, message_type: type, validator: MessageValidator) -> None:
        self._validators[message_type].append(validator)

    def validators_for(self, message_type: type[Any]) -> list[MessageValidator]:
        return list(self._validators.get(message_type, ()))
