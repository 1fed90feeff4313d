"""
Payout summary endpoint.
"""
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fleetdesk.core.dependencies import AdminUser
from fleetdesk.db.database import get_async_session
from fleetdesk.models import Driver, Trip
from fleetdesk.models.enums import TripStatus
from fleetdesk.schemas.payout import PayoutSummaryResponse
from fleetdesk.services.payouts import summarize_payouts

router = APIRouter()


@router.get("", response_model=PayoutSummaryResponse)
async def get_payout_summary(
    current_user: AdminUser,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Commission split of every completed, priced trip, newest first.

    Fleet partner drivers pay the fleet partner rate, everyone else the
    individual rate.
    """
    result = await session.execute(
        select(Trip, Driver)
        .outerjoin(Driver, Trip.driver_id == Driver.id)
        .where(Trip.trip_status == TripStatus.COMPLETED)
        .order_by(Trip.created_at.desc())
    )

    summary = summarize_payouts(result.all())
    return PayoutSummaryResponse.from_summary(summary)
