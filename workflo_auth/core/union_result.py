"""Union result: one of several success shapes, or an error.

Some operations legitimately produce different kinds of success (an OAuth
login yields either a brand new user or an existing one). ``UnionResult``
holds exactly one occupant, identified by a discriminant index:

- ``0``: the error
- ``1..N``: success variant N

Reading a variant that is not occupied raises ``ResultAccessError``.

Usage:
    outcome = UnionResult.of(1, NewUserLogin(...))
    message = outcome.match(
        lambda new: "welcome",
        lambda existing: "welcome back",
        on_error=lambda error: error.message,
    )
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from workflo_auth.core.result import Failure, Result, ResultAccessError, Success

E = TypeVar("E")
R = TypeVar("R")

ERROR_INDEX = 0


@dataclass(frozen=True, slots=True)
class UnionResult(Generic[E]):
    """Discriminated union of N success variants and one error.

    Use the ``of`` and ``failure`` constructors rather than instantiating
    directly.

    Attributes:
        variant: Discriminant index (0 for the error, 1..N for successes).
    """

    variant: int
    _occupant: Any

    @classmethod
    def of(cls, index: int, value: Any) -> "UnionResult[Any]":
        """Build a success occupying variant ``index``.

        Raises:
            ValueError: If index is not a positive variant index.
        """
        if index < 1:
            raise ValueError(f"Success variant index must be >= 1, got {index}")
        return cls(index, value)

    @classmethod
    def failure(cls, error: E) -> "UnionResult[E]":
        return cls(ERROR_INDEX, error)

    @property
    def is_failure(self) -> bool:
        return self.variant == ERROR_INDEX

    @property
    def is_success(self) -> bool:
        return self.variant != ERROR_INDEX

    def is_variant(self, index: int) -> bool:
        return self.variant == index

    @property
    def error(self) -> E:
        if self.variant != ERROR_INDEX:
            raise ResultAccessError(
                f"Cannot read error of a successful result (variant {self.variant})"
            )
        occupant: E = self._occupant
        return occupant

    def value_of(self, index: int) -> Any:
        """Read the value of variant ``index``.

        Raises:
            ResultAccessError: If the result does not occupy that variant.
        """
        if index == ERROR_INDEX or self.variant != index:
            raise ResultAccessError(
                f"Cannot read variant {index}; result occupies variant {self.variant}"
            )
        return self._occupant

    def match(
        self,
        *on_variants: Callable[[Any], R],
        on_error: Callable[[E], R],
    ) -> R:
        """Fold into a single value with one callable per variant.

        Args:
            *on_variants: Handlers for variants 1..N, in order.
            on_error: Handler for the error.

        Raises:
            ResultAccessError: If no handler was supplied for the occupied variant.
        """
        if self.variant == ERROR_INDEX:
            return on_error(self._occupant)
        if self.variant > len(on_variants):
            raise ResultAccessError(f"No handler supplied for variant {self.variant}")
        return on_variants[self.variant - 1](self._occupant)

    def map_variant(self, index: int, fn: Callable[[Any], Any]) -> "UnionResult[E]":
        """Transform variant ``index``; any other occupant is returned unchanged."""
        if self.variant != index or index == ERROR_INDEX:
            return self
        return UnionResult(index, fn(self._occupant))

    def map_error(self, fn: Callable[[E], Any]) -> "UnionResult[Any]":
        if self.variant != ERROR_INDEX:
            return self
        return UnionResult(ERROR_INDEX, fn(self._occupant))

    def to_result(self) -> Result[Any, E]:
        """Collapse to a two-way Result, losing the variant index."""
        if self.variant == ERROR_INDEX:
            return Failure(error=self._occupant)
        return Success(value=self._occupant)

    def __repr__(self) -> str:
        if self.variant == ERROR_INDEX:
            return f"UnionResult.failure({self._occupant!r})"
        return f"UnionResult.of({self.variant}, {self._occupant!r})"
