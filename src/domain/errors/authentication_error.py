"""Authentication domain error messages.

Architecture:
    - Domain layer constants (no infrastructure dependencies)
    - Used as messages on AuthenticationError values inside Failure
    - Never raised as exceptions

Message Policy:
    Login failures for unknown, inactive and wrong-password accounts share
    one message so responses do not reveal which accounts exist. Unusable
    tokens share one message whatever the reason.
"""


class AuthErrorMessage:
    """Authentication error message constants.

    Error Categories:
        - Credential errors: INVALID_CREDENTIALS, EMAIL_NOT_VERIFIED
        - Token errors: INVALID_OR_EXPIRED_TOKEN, INVALID_REFRESH_TOKEN
        - Account state errors: EMAIL_ALREADY_VERIFIED, ACCOUNT_INACTIVE
    """

    # Credential validation errors
    INVALID_CREDENTIALS = "Invalid email or password"
    EMAIL_NOT_VERIFIED = "Email not verified. Please verify your email before logging in"
    CURRENT_PASSWORD_INCORRECT = "Current password is incorrect"

    # Token validation errors
    INVALID_OR_EXPIRED_TOKEN = "Invalid or expired token"
    INVALID_REFRESH_TOKEN = "Invalid or expired refresh token"
    INVALID_ACCESS_TOKEN = "Invalid or expired access token"

    # Account state errors
    EMAIL_ALREADY_VERIFIED = "Email is already verified"
    ACCOUNT_INACTIVE = "Account is inactive"
