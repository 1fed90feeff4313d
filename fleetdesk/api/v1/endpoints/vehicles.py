"""
Vehicle back-office API endpoints.
"""
from typing import Optional
from uuid import UUID
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fleetdesk.core.dependencies import AdminUser
from fleetdesk.db.database import get_async_session
from fleetdesk.models import Vehicle
from fleetdesk.models.enums import DocumentFilter, EntityKind, ReviewStatus
from fleetdesk.schemas.document import DocumentBucketCountsSchema
from fleetdesk.schemas.status import StatusChangeRequest, StatusChangeResponse, StatusCounts
from fleetdesk.schemas.vehicle import VehicleDetail, VehicleListResponse
from fleetdesk.services.detail import build_vehicle_detail, build_vehicle_row
from fleetdesk.services.expiry import count_document_buckets
from fleetdesk.services.filters import ALL, EntityFilter, count_by_status
from fleetdesk.services.lifecycle import apply_status_change
from fleetdesk.services.notifications import status_change_notification
from fleetdesk.services.queries import live_vehicles

router = APIRouter()
logger = logging.getLogger(__name__)


async def _get_vehicle(session: AsyncSession, vehicle_id: UUID) -> Vehicle:
    result = await session.execute(
        select(Vehicle).where(Vehicle.id == vehicle_id)
    )
    vehicle = result.scalar_one_or_none()

    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")

    return vehicle


@router.get("", response_model=VehicleListResponse)
async def list_vehicles(
    current_user: AdminUser,
    search: Optional[str] = Query(None, max_length=100),
    status: Optional[ReviewStatus] = None,
    document: DocumentFilter = DocumentFilter.ALL,
    car_type: Optional[str] = Query(None, max_length=50),
    session: AsyncSession = Depends(get_async_session),
):
    """
    List vehicles, newest first.

    - **search**: Matches car name, number, type or owner name
    - **status**: in_review, approved or rejected
    - **document**: all, expired, expiring or valid
    - **car_type**: Exact vehicle type, case-insensitive

    Vehicles of deleted drivers are not listed.
    """
    result = await session.execute(
        live_vehicles().order_by(Vehicle.created_at.desc())
    )
    rows = [build_vehicle_row(vehicle) for vehicle in result.scalars().all()]

    entity_filter = EntityFilter.for_kind(
        EntityKind.VEHICLE,
        search=search or "",
        status=status or ALL,
        document=document,
        car_type=car_type or ALL,
    )
    items = entity_filter.apply(rows)

    return VehicleListResponse(
        items=items,
        total=len(items),
        status_counts=StatusCounts(**count_by_status(rows)),
        document_counts=DocumentBucketCountsSchema.from_counts(count_document_buckets(rows)),
    )


@router.get("/{vehicle_id}", response_model=VehicleDetail)
async def get_vehicle(
    vehicle_id: UUID,
    current_user: AdminUser,
    session: AsyncSession = Depends(get_async_session),
):
    """Get a vehicle with documents, features and owner."""
    vehicle = await _get_vehicle(session, vehicle_id)
    return build_vehicle_detail(vehicle)


@router.put("/{vehicle_id}/status", response_model=StatusChangeResponse)
async def change_vehicle_status(
    vehicle_id: UUID,
    data: StatusChangeRequest,
    current_user: AdminUser,
    session: AsyncSession = Depends(get_async_session),
):
    """Approve, reject or send a vehicle back to review."""
    vehicle = await _get_vehicle(session, vehicle_id)
    previous = apply_status_change(vehicle, data.status, data.status_description)

    notification = status_change_notification(
        EntityKind.VEHICLE, vehicle, ReviewStatus(data.status), data.status_description
    )
    if notification is not None:
        session.add(notification)

    await session.flush()

    return StatusChangeResponse(
        id=vehicle.id,
        entity=EntityKind.VEHICLE,
        status=vehicle.status,
        status_description=vehicle.status_description,
        previous_status=previous,
    )


@router.delete("/{vehicle_id}", status_code=204)
async def delete_vehicle(
    vehicle_id: UUID,
    current_user: AdminUser,
    session: AsyncSession = Depends(get_async_session),
):
    """Delete a vehicle and its documents."""
    vehicle = await _get_vehicle(session, vehicle_id)
    await session.delete(vehicle)
    await session.flush()

    logger.info(f"Vehicle {vehicle_id} deleted by {current_user.email}")
    return Response(status_code=204)
