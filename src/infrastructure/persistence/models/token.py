"""Token database model.

Stores opaque refresh, email verification and password reset tokens in one
table, discriminated by ``type``. Access tokens are never persisted.

Indexes:
    - ix_tokens_token: lookup by presented token value
    - ix_tokens_user_type_active: session limiting and bulk revocation
    - ix_tokens_expires_at: expired-token sweep
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Enum as SAEnum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.domain.enums import TokenType
from src.infrastructure.persistence.base import BaseMutableModel


class TokenModel(BaseMutableModel):
    """Opaque token row.

    Fields:
        user_id: Owning user (FK users.id, ON DELETE CASCADE)
        token: Opaque token string (64 hex characters)
        type: Token purpose
        expires_at: Absolute expiry
        is_active: False once consumed or revoked
        revoked_at: When the token was deactivated
    """

    __tablename__ = "tokens"
    __table_args__ = (
        Index("ix_tokens_user_type_active", "user_id", "type", "is_active"),
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    token: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    type: Mapped[TokenType] = mapped_column(
        SAEnum(
            TokenType,
            name="token_type",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
    )

    revoked_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    user: Mapped["UserModel"] = relationship(back_populates="tokens")  # noqa: F821

    def __repr__(self) -> str:
        return (
            f"<TokenModel(id={self.id}, user_id={self.user_id}, "
            f"type={self.type.value}, is_active={self.is_active})>"
        )
