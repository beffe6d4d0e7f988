"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*, EMAIL_*)
- Delivery failures (EMAIL_DELIVERY_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Resource errors
    USER_NOT_FOUND = "user_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    PHONE_NUMBER_ALREADY_EXISTS = "phone_number_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    EMAIL_NOT_VERIFIED = "email_not_verified"
    EMAIL_ALREADY_VERIFIED = "email_already_verified"
    TOKEN_INVALID = "token_invalid"
    CURRENT_PASSWORD_MISMATCH = "current_password_mismatch"

    # Delivery failures
    EMAIL_DELIVERY_FAILED = "email_delivery_failed"
