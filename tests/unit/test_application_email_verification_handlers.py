"""Unit tests for VerifyEmailHandler and ResendVerificationEmailHandler.

Tests cover:
- Verification marks the user verified, consumes the token, logs the user in
- Welcome email sent after commit (failure tolerated)
- Already verified / unusable tokens rejected
- Session limit applied to the refresh token issued by verification
- Resend: old tokens replaced, unknown email NOT_FOUND, verified user
  rejected, email failure reported as EXTERNAL_SERVICE_ERROR
"""

from datetime import timedelta

import pytest

from src.application.commands.auth_commands import ResendVerificationEmail, VerifyEmail
from src.application.commands.handlers.resend_verification_email_handler import (
    ResendVerificationEmailHandler,
)
from src.application.commands.handlers.verify_email_handler import VerifyEmailHandler
from src.application.errors import ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import TokenType
from src.domain.errors import AuthErrorMessage
from tests.utils.factories import RecordingEmailService, make_token, make_user


@pytest.fixture
def verify_handler(uow, token_issuer, session_limiter, email_service, auth_config, logger):
    return VerifyEmailHandler(
        uow=uow,
        token_issuer=token_issuer,
        session_limiter=session_limiter,
        email_service=email_service,
        config=auth_config,
        logger=logger,
    )


@pytest.fixture
def resend_handler(uow, token_issuer, email_service, logger):
    return ResendVerificationEmailHandler(
        uow=uow, token_issuer=token_issuer, email_service=email_service, logger=logger
    )


def _verification_token(store, user):
    return store.add_token(make_token(user.id, token_type=TokenType.EMAIL_VERIFICATION))


@pytest.mark.unit
class TestVerifyEmailHandler:
    """Test email verification."""

    @pytest.mark.asyncio
    async def test_verification_logs_user_in(self, verify_handler, store, email_service):
        """Test user verified, token consumed, refresh token stored, welcome sent."""
        # Arrange
        user = store.add_user(make_user(is_email_verified=False))
        token = _verification_token(store, user)

        # Act
        result = await verify_handler.handle(VerifyEmail(token=token.token))

        # Assert
        assert isinstance(result, Success)
        assert result.value.user.is_email_verified is True
        assert store.users[user.id].is_email_verified is True
        assert store.tokens[token.id].is_active is False
        sessions = store.active_tokens_for(user.id, TokenType.REFRESH_TOKEN)
        assert [s.token for s in sessions] == [result.value.refresh_token]
        assert email_service.last("welcome").to_email == user.email

    @pytest.mark.asyncio
    async def test_already_verified_user_rejected(self, verify_handler, store):
        """Test a verified user keeps the token and gets EMAIL_ALREADY_VERIFIED."""
        # Arrange
        user = store.add_user(make_user(is_email_verified=True))
        token = _verification_token(store, user)

        # Act
        result = await verify_handler.handle(VerifyEmail(token=token.token))

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED
        assert result.error.domain_error.code == ErrorCode.EMAIL_ALREADY_VERIFIED
        assert store.tokens[token.id].is_active is True

    @pytest.mark.asyncio
    async def test_expired_token_rejected(self, verify_handler, store):
        # Arrange
        user = store.add_user(make_user(is_email_verified=False))
        token = store.add_token(
            make_token(
                user.id,
                token_type=TokenType.EMAIL_VERIFICATION,
                expires_in=timedelta(seconds=-1),
            )
        )

        # Act
        result = await verify_handler.handle(VerifyEmail(token=token.token))

        # Assert
        assert isinstance(result, Failure)
        assert result.error.message == AuthErrorMessage.INVALID_OR_EXPIRED_TOKEN
        assert store.users[user.id].is_email_verified is False

    @pytest.mark.asyncio
    async def test_consumed_token_rejected(self, verify_handler, store):
        user = store.add_user(make_user(is_email_verified=False))
        token = store.add_token(
            make_token(user.id, token_type=TokenType.EMAIL_VERIFICATION, is_active=False)
        )

        result = await verify_handler.handle(VerifyEmail(token=token.token))

        assert isinstance(result, Failure)
        assert result.error.domain_error.code == ErrorCode.TOKEN_INVALID

    @pytest.mark.asyncio
    async def test_verification_respects_session_limit(
        self, verify_handler, store, auth_config
    ):
        """Test the new session counts against max_sessions."""
        # Arrange
        user = store.add_user(make_user(is_email_verified=False))
        for _ in range(auth_config.max_sessions):
            store.add_token(make_token(user.id))
        token = _verification_token(store, user)

        # Act
        result = await verify_handler.handle(VerifyEmail(token=token.token))

        # Assert
        active = store.active_tokens_for(user.id, TokenType.REFRESH_TOKEN)
        assert len(active) == auth_config.max_sessions
        assert result.value.refresh_token in {t.token for t in active}

    @pytest.mark.asyncio
    async def test_welcome_email_failure_tolerated(
        self, uow, token_issuer, session_limiter, auth_config, logger, store
    ):
        # Arrange
        user = store.add_user(make_user(is_email_verified=False))
        token = _verification_token(store, user)
        handler = VerifyEmailHandler(
            uow=uow,
            token_issuer=token_issuer,
            session_limiter=session_limiter,
            email_service=RecordingEmailService(fail=True),
            config=auth_config,
            logger=logger,
        )

        # Act
        result = await handler.handle(VerifyEmail(token=token.token))

        # Assert
        assert isinstance(result, Success)
        assert store.users[user.id].is_email_verified is True


@pytest.mark.unit
class TestResendVerificationEmailHandler:
    """Test verification email resend."""

    @pytest.mark.asyncio
    async def test_resend_replaces_previous_token(self, resend_handler, store, email_service):
        """Test old token deactivated, new token stored and emailed."""
        # Arrange
        user = store.add_user(make_user(is_email_verified=False))
        old = _verification_token(store, user)

        # Act
        result = await resend_handler.handle(ResendVerificationEmail(email=user.email))

        # Assert
        assert isinstance(result, Success)
        assert store.tokens[old.id].is_active is False
        active = store.active_tokens_for(user.id, TokenType.EMAIL_VERIFICATION)
        assert len(active) == 1
        assert email_service.last("verification").token == active[0].token

    @pytest.mark.asyncio
    async def test_unknown_email_not_found(self, resend_handler):
        result = await resend_handler.handle(
            ResendVerificationEmail(email="ghost@example.com")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert result.error.domain_error.code == ErrorCode.USER_NOT_FOUND

    @pytest.mark.asyncio
    async def test_verified_user_rejected(self, resend_handler, store, email_service):
        user = store.add_user(make_user(is_email_verified=True))

        result = await resend_handler.handle(ResendVerificationEmail(email=user.email))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED
        assert result.error.domain_error.code == ErrorCode.EMAIL_ALREADY_VERIFIED
        assert email_service.sent == []

    @pytest.mark.asyncio
    async def test_email_failure_is_external_service_error(
        self, uow, token_issuer, logger, store
    ):
        """Test a failed send is reported but the new token stays committed."""
        # Arrange
        user = store.add_user(make_user(is_email_verified=False))
        handler = ResendVerificationEmailHandler(
            uow=uow,
            token_issuer=token_issuer,
            email_service=RecordingEmailService(fail=True),
            logger=logger,
        )

        # Act
        result = await handler.handle(ResendVerificationEmail(email=user.email))

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.EXTERNAL_SERVICE_ERROR
        assert result.error.domain_error.code == ErrorCode.EMAIL_DELIVERY_FAILED
        assert len(store.active_tokens_for(user.id, TokenType.EMAIL_VERIFICATION)) == 1
