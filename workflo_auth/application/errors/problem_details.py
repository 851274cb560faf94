"""RFC 9457 Problem Details models.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: Problem details response body
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error (validation failures only).

    Examples:
        >>> ErrorDetail(field="email", code="VALIDATION_INVALID_FORMAT",
        ...             message="Email must be a valid email address")
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        code: Machine-readable error code
        errors: Field-specific errors (validation failures only)
        trace_id: Request trace ID for debugging
    """

    type: str = Field(..., description="URI reference identifying the problem type")
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(..., description="URI reference identifying this occurrence")
    code: str = Field(..., description="Machine-readable error code")
    errors: list[ErrorDetail] | None = Field(None, description="Field-specific errors")
    trace_id: str | None = Field(None, description="Request trace ID for debugging")
