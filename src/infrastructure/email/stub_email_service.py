"""Stub email service (development/testing).

Implements EmailProtocol by writing each message to the structured log
instead of delivering it. The info line carries only a token prefix; the
full, clickable link is logged at debug level so it stays out of
production logs (LOG_LEVEL=DEBUG to see it locally).
"""

from src.domain.protocols.logger_protocol import LoggerProtocol


class StubEmailService:
    """Log-only email adapter.

    Example:
        >>> email = StubEmailService(logger=logger, base_url="http://localhost:8000")
        >>> await email.send_welcome_email("jane@example.com", "Jane Doe")
    """

    def __init__(self, logger: LoggerProtocol, base_url: str) -> None:
        self._logger = logger
        self._base_url = base_url.rstrip("/")

    def _log_link(
        self, message: str, path: str, token: str, to_email: str, full_name: str
    ) -> None:
        url = f"{self._base_url}/{path}?token="
        self._logger.info(
            message,
            to_email=to_email,
            full_name=full_name,
            url=f"{url}{token[:8]}...",
        )
        self._logger.debug(f"{message} link", to_email=to_email, url=f"{url}{token}")

    async def send_verification_email(
        self,
        to_email: str,
        full_name: str,
        token: str,
    ) -> None:
        self._log_link(
            "[STUB] Verification email", "verify-email", token, to_email, full_name
        )

    async def send_password_reset_email(
        self,
        to_email: str,
        full_name: str,
        token: str,
    ) -> None:
        self._log_link(
            "[STUB] Password reset email", "reset-password", token, to_email, full_name
        )

    async def send_welcome_email(self, to_email: str, full_name: str) -> None:
        self._logger.info(
            "[STUB] Welcome email",
            to_email=to_email,
            full_name=full_name,
        )
