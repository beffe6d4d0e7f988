"""RFC 7807 Problem Details for HTTP APIs.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> ErrorDetail(
        ...     field="email",
        ...     code="email_already_exists",
        ...     message="Email already registered",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details body.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: Request path of this occurrence
        code: Machine-readable domain error code, when one applies
        errors: Field-specific errors (conflicts, validation failures)
        trace_id: Request trace ID for debugging

    Examples:
        >>> ProblemDetails(
        ...     type="http://localhost:8000/errors/unauthorized",
        ...     title="Authentication Required",
        ...     status=401,
        ...     detail="Email not verified. Please verify your email before logging in",
        ...     instance="/api/v1/sessions",
        ...     code="email_not_verified",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/conflict"],
    )
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[409])
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(
        ...,
        description="Request path of this occurrence",
        examples=["/api/v1/users"],
    )
    code: str | None = Field(None, description="Domain error code")
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(None, description="Request trace ID for debugging")
