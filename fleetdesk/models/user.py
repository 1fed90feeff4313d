"""User model for authentication."""
from typing import Optional
from uuid import UUID

from sqlalchemy import Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .enums import UserRole


class User(BaseModel):
    """User account for back-office authentication.

    Drivers and fleet companies log in through an account linked to their
    record; admins have no link. Password is stored as bcrypt hash.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False, index=True
    )
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(
            UserRole,
            name="user_role",
            create_type=False,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
    )
    driver_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("drivers.id", ondelete="CASCADE"), nullable=True
    )
    fleet_company_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("fleet_companies.id", ondelete="CASCADE"), nullable=True
    )
    is_active: Mapped[bool] = mapped_column(default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<User(email={self.email}, role={self.role}, is_active={self.is_active})>"
