"""Resend verification email handler.

Flow:
1. Find user by normalized email (NOT_FOUND if unknown)
2. Reject already verified users (UNAUTHORIZED)
3. Deactivate previous EMAIL_VERIFICATION tokens
4. Issue a new EMAIL_VERIFICATION token (24h), commit
5. Send verification email

Unlike the other flows the email is the whole point here, so a failed send
is reported as EXTERNAL_SERVICE_ERROR. The new token stays committed and a
later resend replaces it.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from src.application.commands.auth_commands import ResendVerificationEmail
from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    execution_failed,
    unauthorized,
    user_not_found,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenType
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import EmailProtocol, LoggerProtocol, UnitOfWorkProtocol
from src.domain.validators import normalize_email

if TYPE_CHECKING:
    from src.infrastructure.security.token_issuer import TokenIssuer

_SEND_FAILED = "Could not send verification email. Please try again later"


class ResendVerificationEmailHandler:
    """Handler for resending the verification email."""

    def __init__(
        self,
        uow: UnitOfWorkProtocol,
        token_issuer: TokenIssuer,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._token_issuer = token_issuer
        self._email_service = email_service
        self._logger = logger

    async def handle(
        self, cmd: ResendVerificationEmail
    ) -> Result[None, ApplicationError]:
        """Handle resend verification email command.

        Returns:
            Success(None) once the email was handed to the email service.
            Failure(ApplicationError) with NOT_FOUND, UNAUTHORIZED or
            EXTERNAL_SERVICE_ERROR.
        """
        email = normalize_email(cmd.email)

        try:
            async with self._uow as uow:
                user = await uow.users.find_by_email(email)
                if user is None:
                    return Failure(error=user_not_found(email))

                if user.is_email_verified:
                    return Failure(
                        error=unauthorized(
                            AuthErrorMessage.EMAIL_ALREADY_VERIFIED,
                            ErrorCode.EMAIL_ALREADY_VERIFIED,
                        )
                    )

                now = datetime.now(UTC)
                await uow.tokens.deactivate_all_for_user(
                    user.id, TokenType.EMAIL_VERIFICATION, now
                )
                verification_token = self._token_issuer.new_token(
                    user.id, TokenType.EMAIL_VERIFICATION, now
                )
                await uow.tokens.save(verification_token)
                await uow.commit()
        except Exception as e:
            self._logger.error("Resend verification failed", error=e)
            return Failure(error=execution_failed("Resend verification failed"))

        try:
            await self._email_service.send_verification_email(
                to_email=user.email,
                full_name=user.full_name,
                token=verification_token.token,
            )
        except Exception as e:
            self._logger.error(
                "Verification email resend failed", error=e, user_id=str(user.id)
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.EXTERNAL_SERVICE_ERROR,
                    message=_SEND_FAILED,
                    domain_error=DomainError(
                        code=ErrorCode.EMAIL_DELIVERY_FAILED, message=_SEND_FAILED
                    ),
                    details={"user_id": str(user.id)},
                )
            )

        self._logger.info("Verification email resent", user_id=str(user.id))
        return Success(value=None)
