"""Payout summary schemas."""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from fleetdesk.models.enums import DriverType
from fleetdesk.schemas.base import BaseSchema
from fleetdesk.services.payouts import PayoutSummary


class PayoutLineResponse(BaseSchema):
    """Commission split of one completed trip."""
    trip_id: UUID
    trip_date: Optional[datetime] = None
    driver_id: Optional[UUID] = None
    driver_name: str
    driver_type: DriverType
    company_name: str
    total_price: Decimal
    commission_rate: Decimal
    admin_commission: Decimal
    driver_payout: Decimal


class PayoutSummaryResponse(BaseSchema):
    """GET /payouts response."""
    lines: list[PayoutLineResponse]
    trip_count: int
    total_revenue: Decimal
    total_commission: Decimal
    total_driver_payout: Decimal

    @classmethod
    def from_summary(cls, summary: PayoutSummary) -> "PayoutSummaryResponse":
        return cls(
            lines=[PayoutLineResponse.model_validate(line) for line in summary.lines],
            trip_count=summary.trip_count,
            total_revenue=summary.total_revenue,
            total_commission=summary.total_commission,
            total_driver_payout=summary.total_driver_payout,
        )
