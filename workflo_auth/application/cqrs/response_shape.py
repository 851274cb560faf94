"""Closed set of handler response shapes.

Handlers declare their shape as a class attribute so the validation
pipeline can build a failure of the right type without calling them.
"""

from enum import Enum
from typing import Any

from workflo_auth.core.errors import DomainError
from workflo_auth.core.result import Failure
from workflo_auth.core.union_result import UnionResult


class ResponseShape(Enum):
    """How a handler reports its outcome."""

    RESULT = "result"  # Success | Failure
    UNION = "union"  # UnionResult

    def failure(self, error: DomainError) -> Any:
        """Wrap ``error`` in this shape's failure value."""
        if self is ResponseShape.UNION:
            return UnionResult.failure(error)
        return Failure(error=error)
