"""Factories for the ApplicationError values handlers return.

Usage:
    return Failure(
        error=unauthorized(
            AuthErrorMessage.INVALID_CREDENTIALS, ErrorCode.INVALID_CREDENTIALS
        )
    )
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, ConflictError, NotFoundError


def unauthorized(message: str, code: ErrorCode) -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.UNAUTHORIZED,
        message=message,
        domain_error=AuthenticationError(code=code, message=message),
    )


def conflict(message: str, code: ErrorCode, field: str) -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.CONFLICT,
        message=message,
        domain_error=ConflictError(
            code=code,
            message=message,
            resource_type="User",
            conflicting_field=field,
        ),
    )


def user_not_found(resource_id: str) -> ApplicationError:
    """NOT_FOUND for a user looked up by id or email."""
    return ApplicationError(
        code=ApplicationErrorCode.NOT_FOUND,
        message="User not found",
        domain_error=NotFoundError(
            code=ErrorCode.USER_NOT_FOUND,
            message="User not found",
            resource_type="User",
            resource_id=resource_id,
        ),
    )


def execution_failed(message: str) -> ApplicationError:
    """Generic failure for unexpected errors (details go to the log only)."""
    return ApplicationError(
        code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
        message=message,
    )
