"""Registration handler for User Authentication.

Flow:
1. Validate fields (handled by Annotated types)
2. Check email uniqueness
3. Check phone number uniqueness
4. Hash password
5. Create unverified User entity
6. Issue email verification token (24h)
7. Save user and token, commit
8. Send verification email (best-effort, after commit)
9. Return Success(RegistrationResult)

No access or refresh token is issued until the email is verified.

Architecture:
- Application layer imports from domain layer (entities, protocols)
- Repositories reach the handler through the injected unit of work
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterUser
from src.application.dtos.auth_dtos import RegistrationResult, UserView
from src.application.errors import ApplicationError, conflict, execution_failed
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.token import Token
from src.domain.entities.user import User
from src.domain.enums import TokenType
from src.domain.protocols import (
    EmailProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    UnitOfWorkProtocol,
)
from src.domain.validators import normalize_email

if TYPE_CHECKING:
    from src.infrastructure.security.token_issuer import TokenIssuer


class RegistrationError:
    """Registration-specific error messages."""

    EMAIL_ALREADY_EXISTS = "Email already registered"
    PHONE_NUMBER_ALREADY_EXISTS = "Phone number already registered"
    REGISTRATION_FAILED = "Registration failed"


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(
        self,
        uow: UnitOfWorkProtocol,
        password_service: PasswordHashingProtocol,
        token_issuer: TokenIssuer,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            uow: Unit of work owning the registration transaction.
            password_service: Password hashing service.
            token_issuer: Issues the email verification token.
            email_service: Sends the verification email.
            logger: Structured logger.
        """
        self._uow = uow
        self._password_service = password_service
        self._token_issuer = token_issuer
        self._email_service = email_service
        self._logger = logger

    async def handle(
        self, cmd: RegisterUser
    ) -> Result[RegistrationResult, ApplicationError]:
        """Handle user registration command.

        Returns:
            Success(RegistrationResult) with an unverified user.
            Failure(ApplicationError) with CONFLICT for a duplicate email or
            phone number, COMMAND_EXECUTION_FAILED for storage failures.
        """
        email = normalize_email(cmd.email)
        phone_number = cmd.phone_number.strip()

        try:
            async with self._uow as uow:
                if await uow.users.find_by_email(email) is not None:
                    self._logger.warning(
                        "Registration rejected: email already registered",
                        email=email,
                    )
                    return Failure(
                        error=conflict(
                            RegistrationError.EMAIL_ALREADY_EXISTS,
                            ErrorCode.EMAIL_ALREADY_EXISTS,
                            "email",
                        )
                    )

                if await uow.users.find_by_phone_number(phone_number) is not None:
                    self._logger.warning(
                        "Registration rejected: phone number already registered",
                        email=email,
                    )
                    return Failure(
                        error=conflict(
                            RegistrationError.PHONE_NUMBER_ALREADY_EXISTS,
                            ErrorCode.PHONE_NUMBER_ALREADY_EXISTS,
                            "phone_number",
                        )
                    )

                now = datetime.now(UTC)
                user = User(
                    id=uuid7(),
                    full_name=cmd.full_name.strip(),
                    email=email,
                    password_hash=self._password_service.hash_password(cmd.password),
                    phone_number=phone_number,
                    created_at=now,
                    updated_at=now,
                )
                await uow.users.save(user)

                verification_token = self._token_issuer.new_token(
                    user.id, TokenType.EMAIL_VERIFICATION, now
                )
                await uow.tokens.save(verification_token)
                await uow.commit()
        except Exception as e:
            self._logger.error("Registration failed", error=e, email=email)
            return Failure(
                error=execution_failed(RegistrationError.REGISTRATION_FAILED)
            )

        self._logger.info("User registered", user_id=str(user.id))
        await self._send_verification_email(user, verification_token)

        return Success(value=RegistrationResult(user=UserView.from_user(user)))

    async def _send_verification_email(self, user: User, token: Token) -> None:
        try:
            await self._email_service.send_verification_email(
                to_email=user.email,
                full_name=user.full_name,
                token=token.token,
            )
        except Exception as e:
            self._logger.error(
                "Verification email failed after registration",
                error=e,
                user_id=str(user.id),
            )
