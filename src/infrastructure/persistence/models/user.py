"""User database model for authentication.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - is_email_verified: Email verification required before login
"""

from sqlalchemy import Boolean, Enum as SAEnum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.domain.enums import UserRole
from src.infrastructure.persistence.base import BaseMutableModel


class UserModel(BaseMutableModel):
    """User model for credentials and account state.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when user registered (from BaseMutableModel)
        updated_at: Timestamp when user last updated (from BaseMutableModel)
        full_name: Display name
        email: Unique email address (lowercase, indexed)
        password_hash: Bcrypt hashed password
        phone_number: Unique phone number
        role: Storefront role
        is_active: Account active status (deactivated users cannot login)
        is_email_verified: Email verification status (blocks login if False)

    Relationships:
        - tokens: One-to-many (cascade delete)
    """

    __tablename__ = "users"

    full_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    phone_number: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        unique=True,
    )

    role: Mapped[UserRole] = mapped_column(
        SAEnum(
            UserRole,
            name="user_role",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=UserRole.CUSTOMER,
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Account active status (deactivated users cannot login)",
    )

    is_email_verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Email verification status (must be True to login)",
    )

    tokens: Mapped[list["TokenModel"]] = relationship(  # noqa: F821
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return (
            f"<UserModel("
            f"id={self.id}, "
            f"email={self.email!r}, "
            f"is_email_verified={self.is_email_verified}, "
            f"is_active={self.is_active}"
            f")>"
        )
