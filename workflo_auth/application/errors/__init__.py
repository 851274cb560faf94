"""Problem Details error responses.

Usage:
    from workflo_auth.application.errors import ErrorResponseBuilder
"""

from workflo_auth.application.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from workflo_auth.application.errors.problem_details import ErrorDetail, ProblemDetails

__all__ = ["ErrorDetail", "ErrorResponseBuilder", "ProblemDetails"]
