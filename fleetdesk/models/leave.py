"""
Driver leave model.
"""
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fleetdesk.models.base import BaseModel

if TYPE_CHECKING:
    from fleetdesk.models.driver import Driver


class DriverLeave(BaseModel):
    """
    A period a driver is unavailable.

    leave_end >= leave_start is expected but not enforced. Whether a leave
    is active, past or upcoming is derived at read time, never stored.
    """
    __tablename__ = "driver_leaves"

    driver_id: Mapped[UUID] = mapped_column(
        ForeignKey("drivers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    leave_start: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    leave_end: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    leave_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    driver: Mapped["Driver"] = relationship("Driver", back_populates="leave_history")
