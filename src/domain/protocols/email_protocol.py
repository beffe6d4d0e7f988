"""EmailProtocol - Port for outbound account emails.

Infrastructure layer provides concrete implementations (StubEmailService).
Sends are always issued after the owning transaction commits, so a failed
send never rolls back account state.
"""

from typing import Protocol


class EmailProtocol(Protocol):
    """Email service protocol (port).

    Methods:
        send_verification_email: Send email verification token
        send_password_reset_email: Send password reset token
        send_welcome_email: Greet a newly verified user

    Implementations raise on delivery failure. Callers decide whether the
    failure is surfaced or only logged.
    """

    async def send_verification_email(
        self,
        to_email: str,
        full_name: str,
        token: str,
    ) -> None:
        """Send email verification token to user.

        Args:
            to_email: Recipient email address.
            full_name: Recipient display name.
            token: Opaque verification token.
        """
        ...

    async def send_password_reset_email(
        self,
        to_email: str,
        full_name: str,
        token: str,
    ) -> None:
        """Send password reset token to user."""
        ...

    async def send_welcome_email(
        self,
        to_email: str,
        full_name: str,
    ) -> None:
        ...
