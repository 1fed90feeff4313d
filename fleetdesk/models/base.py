"""
Base model classes and mixins for FleetDesk.
"""
from datetime import date, datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from sqlalchemy import Date, DateTime, Enum, String, func
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID as PG_UUID

from fleetdesk.db.database import Base
from fleetdesk.models.enums import ReviewStatus


class TimestampMixin:
    """Mixin for created_at and updated_at timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.current_timestamp(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp(),
        nullable=False,
    )


class UUIDPrimaryKeyMixin:
    """Mixin for UUID primary key."""

    id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )


class ReviewableMixin:
    """
    Mixin for records under the approve/reject/in-review workflow.

    status is nullable because legacy rows carry NULL, which reads as IN_REVIEW.
    """

    status: Mapped[Optional[ReviewStatus]] = mapped_column(
        Enum(
            ReviewStatus,
            name="review_status",
            create_type=False,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=True,
        default=ReviewStatus.IN_REVIEW,
    )

    status_description: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
        comment="Reason captured for the last negative transition",
    )


class DocumentMixin:
    """Common columns of driver, vehicle and fleet company documents."""

    document_number: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    document_expiry_date: Mapped[Optional[date]] = mapped_column(
        Date,
        nullable=True,
    )

    document_url: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
    )


class BaseModel(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """
    Abstract base model with UUID primary key and timestamps.

    All domain models should inherit from this class.
    """
    __abstract__ = True

    def to_dict(self) -> dict[str, Any]:
        """Convert model instance to dictionary."""
        return {
            column.name: getattr(self, column.name)
            for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        """String representation for debugging."""
        class_name = self.__class__.__name__
        attrs = ", ".join(
            f"{k}={v!r}"
            for k, v in self.to_dict().items()
            if k in ("id", "email", "car_number", "company_name", "status")
        )
        return f"<{class_name}({attrs})>"
