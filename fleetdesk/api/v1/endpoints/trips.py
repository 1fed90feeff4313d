"""
Trip API endpoints.

Trips are booked elsewhere; the back office reads them and moves them
through their status.
"""
from typing import Annotated, Optional
from uuid import UUID
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fleetdesk.core.dependencies import require_roles
from fleetdesk.db.database import get_async_session
from fleetdesk.models import Trip, User
from fleetdesk.models.enums import TripStatus, UserRole
from fleetdesk.schemas.trip import TripDetail, TripListResponse, TripStatusUpdate
from fleetdesk.services.detail import build_trip_detail, build_trip_summary

router = APIRouter()
logger = logging.getLogger(__name__)

TripReader = Annotated[
    User,
    Depends(require_roles(UserRole.ADMIN, UserRole.DRIVER, UserRole.FLEET_COMPANY)),
]


def _scope_query(query, user: User):
    """Restrict a trip query to what the user may see."""
    if user.role == UserRole.DRIVER:
        return query.where(Trip.driver_id == user.driver_id)
    if user.role == UserRole.FLEET_COMPANY:
        return query.where(Trip.fleet_company_id == user.fleet_company_id)
    return query


async def _get_trip(session: AsyncSession, trip_id: UUID, user: User) -> Trip:
    result = await session.execute(
        _scope_query(select(Trip).where(Trip.id == trip_id), user)
    )
    trip = result.scalar_one_or_none()

    if not trip:
        raise HTTPException(status_code=404, detail="Trip not found")

    return trip


@router.get("", response_model=TripListResponse)
async def list_trips(
    current_user: TripReader,
    trip_status: Optional[TripStatus] = None,
    session: AsyncSession = Depends(get_async_session),
):
    """
    List trips, latest start first.

    - **trip_status**: upcoming, running, completed or canceled
    """
    query = _scope_query(select(Trip), current_user)

    if trip_status:
        query = query.where(Trip.trip_status == trip_status)

    result = await session.execute(query.order_by(Trip.trip_start_date.desc()))
    items = [build_trip_summary(trip) for trip in result.scalars().all()]

    return TripListResponse(items=items, total=len(items))


@router.get("/{trip_id}", response_model=TripDetail)
async def get_trip(
    trip_id: UUID,
    current_user: TripReader,
    session: AsyncSession = Depends(get_async_session),
):
    """Get a trip with stops, pricing and booking snapshots."""
    trip = await _get_trip(session, trip_id, current_user)
    return build_trip_detail(trip)


@router.put("/{trip_id}/status", response_model=TripDetail)
async def update_trip_status(
    trip_id: UUID,
    data: TripStatusUpdate,
    current_user: Annotated[User, Depends(require_roles(UserRole.ADMIN, UserRole.DRIVER))],
    session: AsyncSession = Depends(get_async_session),
):
    """Set a trip's status (admin, or the assigned driver)."""
    trip = await _get_trip(session, trip_id, current_user)

    previous = trip.trip_status
    trip.trip_status = TripStatus(data.trip_status)
    await session.flush()

    logger.info(f"Trip {trip_id} status {previous} -> {trip.trip_status}")
    return build_trip_detail(trip)
