"""
Driver back-office API endpoints.
"""
from typing import Annotated, Optional
from uuid import UUID
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fleetdesk.core.dependencies import AdminUser, require_roles
from fleetdesk.db.database import get_async_session
from fleetdesk.models import Driver, Trip, User
from fleetdesk.models.enums import DocumentFilter, EntityKind, ReviewStatus, UserRole
from fleetdesk.schemas.document import DocumentBucketCountsSchema
from fleetdesk.schemas.driver import DriverDetail, DriverListResponse
from fleetdesk.schemas.status import StatusChangeRequest, StatusChangeResponse, StatusCounts
from fleetdesk.services.detail import build_driver_detail, build_driver_row
from fleetdesk.services.expiry import count_document_buckets
from fleetdesk.services.filters import ALL, EntityFilter, count_by_status
from fleetdesk.services.lifecycle import apply_status_change
from fleetdesk.services.notifications import status_change_notification
from fleetdesk.services.queries import live_drivers

router = APIRouter()
logger = logging.getLogger(__name__)


async def _get_driver(session: AsyncSession, driver_id: UUID) -> Driver:
    result = await session.execute(
        select(Driver).where(Driver.id == driver_id, Driver.is_deleted == False)
    )
    driver = result.scalar_one_or_none()

    if not driver:
        raise HTTPException(status_code=404, detail="Driver not found")

    return driver


@router.get("", response_model=DriverListResponse)
async def list_drivers(
    current_user: AdminUser,
    search: Optional[str] = Query(None, max_length=100),
    status: Optional[ReviewStatus] = None,
    document: DocumentFilter = DocumentFilter.ALL,
    session: AsyncSession = Depends(get_async_session),
):
    """
    List drivers, newest first.

    - **search**: Matches name, email, city or fleet company name
    - **status**: in_review, approved or rejected
    - **document**: all, expired, expiring or valid
    """
    result = await session.execute(
        live_drivers().order_by(Driver.created_at.desc())
    )
    rows = [build_driver_row(driver) for driver in result.scalars().all()]

    entity_filter = EntityFilter.for_kind(
        EntityKind.DRIVER,
        search=search or "",
        status=status or ALL,
        document=document,
    )
    items = entity_filter.apply(rows)

    return DriverListResponse(
        items=items,
        total=len(items),
        status_counts=StatusCounts(**count_by_status(rows)),
        document_counts=DocumentBucketCountsSchema.from_counts(count_document_buckets(rows)),
    )


@router.get("/{driver_id}", response_model=DriverDetail)
async def get_driver(
    driver_id: UUID,
    current_user: Annotated[User, Depends(require_roles(UserRole.ADMIN, UserRole.DRIVER))],
    session: AsyncSession = Depends(get_async_session),
):
    """Get a driver with documents, vehicles, trips and leave history."""
    if current_user.role == UserRole.DRIVER and current_user.driver_id != driver_id:
        raise HTTPException(status_code=403, detail="Not enough permissions")

    driver = await _get_driver(session, driver_id)

    trips = await session.execute(
        select(Trip)
        .where(Trip.driver_id == driver_id)
        .order_by(Trip.trip_start_date.desc())
    )

    return build_driver_detail(driver, trips.scalars().all())


@router.put("/{driver_id}/status", response_model=StatusChangeResponse)
async def change_driver_status(
    driver_id: UUID,
    data: StatusChangeRequest,
    current_user: AdminUser,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Approve, reject or send a driver back to review.

    status_description is replaced only when provided.
    """
    driver = await _get_driver(session, driver_id)
    previous = apply_status_change(driver, data.status, data.status_description)

    notification = status_change_notification(
        EntityKind.DRIVER, driver, ReviewStatus(data.status), data.status_description
    )
    if notification is not None:
        session.add(notification)

    await session.flush()

    return StatusChangeResponse(
        id=driver.id,
        entity=EntityKind.DRIVER,
        status=driver.status,
        status_description=driver.status_description,
        previous_status=previous,
    )


@router.delete("/{driver_id}", status_code=204)
async def delete_driver(
    driver_id: UUID,
    current_user: AdminUser,
    session: AsyncSession = Depends(get_async_session),
):
    """Soft-delete a driver; trips keep referencing the record."""
    driver = await _get_driver(session, driver_id)
    driver.is_deleted = True
    await session.flush()

    logger.info(f"Driver {driver_id} deleted by {current_user.email}")
    return Response(status_code=204)
