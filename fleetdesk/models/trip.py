"""
Trip and TripStop models for FleetDesk.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fleetdesk.models.base import BaseModel
from fleetdesk.models.enums import PaymentStatus, TripStatus, TripType


def _enum(enum_cls, name: str) -> Enum:
    return Enum(
        enum_cls,
        name=name,
        create_type=False,
        values_callable=lambda e: [m.value for m in e],
    )


class Trip(BaseModel):
    """
    A booked trip.

    Distance is computed upstream; pricing and payment data are display only.
    The *_details columns are snapshots taken at booking time so the trip
    keeps rendering after the referenced records change.
    """
    __tablename__ = "trips"

    # =========================================================================
    # Assignment
    # =========================================================================
    user_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("users.id"),
        nullable=True,
    )

    driver_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("drivers.id"),
        nullable=True,
        index=True,
    )

    vehicle_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("vehicles.id"),
        nullable=True,
    )

    fleet_company_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("fleet_companies.id"),
        nullable=True,
        index=True,
    )

    # =========================================================================
    # Itinerary
    # =========================================================================
    trip_type: Mapped[TripType] = mapped_column(
        _enum(TripType, "trip_type"),
        default=TripType.SINGLE_TRIP,
        nullable=False,
    )

    pickup_location: Mapped[str] = mapped_column(Text, nullable=False)
    drop_location: Mapped[str] = mapped_column(Text, nullable=False)

    trip_start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    trip_end_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    distance_km: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(10, 2),
        nullable=True,
        comment="Pre-computed route distance",
    )

    # =========================================================================
    # Status
    # =========================================================================
    trip_status: Mapped[TripStatus] = mapped_column(
        _enum(TripStatus, "trip_status"),
        default=TripStatus.UPCOMING,
        nullable=False,
        index=True,
    )

    payment_status: Mapped[PaymentStatus] = mapped_column(
        _enum(PaymentStatus, "payment_status"),
        default=PaymentStatus.PENDING,
        nullable=False,
    )

    # =========================================================================
    # Pricing
    # =========================================================================
    base_price: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0"), nullable=False
    )
    tax_amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0"), nullable=False
    )
    total_price: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0"), nullable=False
    )

    # =========================================================================
    # Snapshots
    # =========================================================================
    user_details: Mapped[Optional[dict]] = mapped_column(JSONB, nullable=True)
    driver_details: Mapped[Optional[dict]] = mapped_column(JSONB, nullable=True)
    vehicle_details: Mapped[Optional[dict]] = mapped_column(JSONB, nullable=True)
    fleet_company_details: Mapped[Optional[dict]] = mapped_column(JSONB, nullable=True)
    payment_transaction: Mapped[Optional[dict]] = mapped_column(JSONB, nullable=True)

    stops: Mapped[list["TripStop"]] = relationship(
        "TripStop",
        back_populates="trip",
        lazy="selectin",
        order_by="TripStop.stop_order",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Trip(id={self.id}, trip_status={self.trip_status})>"


class TripStop(BaseModel):
    """Intermediate stop; stop_order is the visiting order."""
    __tablename__ = "trip_stops"

    trip_id: Mapped[UUID] = mapped_column(
        ForeignKey("trips.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    stop_order: Mapped[int] = mapped_column(Integer, nullable=False)
    location: Mapped[str] = mapped_column(String(500), nullable=False)

    trip: Mapped["Trip"] = relationship("Trip", back_populates="stops")
