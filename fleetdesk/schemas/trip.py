"""
Trip Pydantic schemas.

Pricing and payment data are display only.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from pydantic import Field

from fleetdesk.models.enums import PaymentStatus, TripStatus, TripType
from fleetdesk.schemas.base import BaseSchema, IDSchema, TimestampSchema


class TripStopResponse(BaseSchema):
    """Intermediate stop."""
    stop_order: int
    location: str


class TripSummary(IDSchema):
    """Trip row in lists and nested in driver details."""
    trip_type: TripType
    pickup_location: str
    drop_location: str
    trip_start_date: datetime
    trip_end_date: Optional[datetime] = None
    trip_status: TripStatus
    payment_status: PaymentStatus
    total_price: Decimal = Decimal("0")
    driver_id: Optional[UUID] = None
    vehicle_id: Optional[UUID] = None


class TripDetail(TripSummary, TimestampSchema):
    """Full trip with stops, pricing and booking snapshots."""
    user_id: Optional[UUID] = None
    fleet_company_id: Optional[UUID] = None
    distance_km: Optional[Decimal] = None
    base_price: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")
    stops: list[TripStopResponse] = Field(default_factory=list)
    user_details: dict[str, Any] = Field(default_factory=dict)
    driver_details: dict[str, Any] = Field(default_factory=dict)
    vehicle_details: dict[str, Any] = Field(default_factory=dict)
    fleet_company_details: dict[str, Any] = Field(default_factory=dict)
    payment_transaction: dict[str, Any] = Field(default_factory=dict)


class TripStatusUpdate(BaseSchema):
    """Body of PUT /trips/{id}/status."""
    trip_status: TripStatus


class TripListResponse(BaseSchema):
    """Trip list."""
    items: list[TripSummary]
    total: int
