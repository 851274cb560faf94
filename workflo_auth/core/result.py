"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. This approach makes error handling explicit and
testable.

A Result holds exactly one occupant: ``Success`` carries a value, ``Failure``
carries an error. Reading the occupant of the other branch (``Success.error``
or ``Failure.value``) raises ``ResultAccessError`` instead of returning None.

Usage:
    def parse_age(raw: str) -> Result[int, ValidationError]:
        if not raw.isdigit():
            return Failure(error=ValidationError.invalid_format("Age"))
        return Success(value=int(raw))

    match parse_age("42"):
        case Success(value=age):
            print(f"Age: {age}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")


class ResultAccessError(RuntimeError):
    """Raised when a result is read through the branch it does not occupy."""


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> NoReturn:
        """Success has no error; access is a programming fault."""
        raise ResultAccessError("Cannot read error of a successful result")

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> NoReturn:
        raise ResultAccessError("Cannot read error of a successful result")

    def match(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[Any], R],
    ) -> R:
        """Fold the result into a single value.

        Args:
            on_success: Called with the value.
            on_failure: Not called for a successful result.

        Returns:
            Whatever ``on_success`` returns.
        """
        return on_success(self.value)

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        return Success(value=fn(self.value))

    def map_error(self, fn: Callable[[Any], Any]) -> "Success[T]":
        return self

    def bind(self, fn: Callable[[T], "Result[U, F]"]) -> "Result[U, F]":
        """Chain another fallible operation onto the value."""
        return fn(self.value)


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> NoReturn:
        """Failure has no value; access is a programming fault."""
        raise ResultAccessError(f"Cannot read value of a failed result: {self.error}")

    def unwrap(self) -> NoReturn:
        raise ResultAccessError(f"Cannot read value of a failed result: {self.error}")

    def unwrap_error(self) -> E:
        return self.error

    def match(
        self,
        on_success: Callable[[Any], R],
        on_failure: Callable[[E], R],
    ) -> R:
        return on_failure(self.error)

    def map(self, fn: Callable[[Any], Any]) -> "Failure[E]":
        return self

    def map_error(self, fn: Callable[[E], F]) -> "Failure[F]":
        return Failure(error=fn(self.error))

    def bind(self, fn: Callable[[Any], Any]) -> "Failure[E]":
        return self


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
