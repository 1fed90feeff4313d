"""Notification model."""
from typing import Optional
from uuid import UUID

from sqlalchemy import Boolean, Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fleetdesk.models.base import BaseModel
from fleetdesk.models.enums import NotificationType, UserRole


class Notification(BaseModel):
    """
    Back-office notification.

    Addressed to a role; driver_id / fleet_company_id narrow it to one
    driver or company. Admin notifications carry neither.
    """
    __tablename__ = "notifications"

    recipient_role: Mapped[UserRole] = mapped_column(
        Enum(
            UserRole,
            name="user_role",
            create_type=False,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        index=True,
    )

    driver_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("drivers.id", ondelete="CASCADE"),
        nullable=True,
    )

    fleet_company_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("fleet_companies.id", ondelete="CASCADE"),
        nullable=True,
    )

    notification_type: Mapped[NotificationType] = mapped_column(
        Enum(
            NotificationType,
            name="notification_type",
            create_type=False,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    # Deduplicates scan output: one notification per document per class
    reference_key: Mapped[Optional[str]] = mapped_column(
        String(200),
        nullable=True,
        index=True,
    )

    is_read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<Notification(id={self.id}, type={self.notification_type}, is_read={self.is_read})>"
