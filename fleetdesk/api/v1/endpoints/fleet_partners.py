"""
Fleet partner back-office API endpoints.
"""
from typing import Annotated, Optional
from uuid import UUID
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fleetdesk.core.dependencies import AdminUser, require_roles
from fleetdesk.db.database import get_async_session
from fleetdesk.models import FleetCompany, User
from fleetdesk.models.enums import DocumentFilter, EntityKind, ReviewStatus, UserRole
from fleetdesk.schemas.document import DocumentBucketCountsSchema
from fleetdesk.schemas.fleet_company import FleetPartnerDetail, FleetPartnerListResponse
from fleetdesk.schemas.status import StatusChangeRequest, StatusChangeResponse, StatusCounts
from fleetdesk.services.detail import build_fleet_partner_detail, build_fleet_partner_row
from fleetdesk.services.expiry import count_document_buckets
from fleetdesk.services.filters import ALL, EntityFilter, count_by_status
from fleetdesk.services.lifecycle import apply_status_change
from fleetdesk.services.notifications import status_change_notification
from fleetdesk.services.queries import live_fleet_companies

router = APIRouter()
logger = logging.getLogger(__name__)


async def _get_fleet_partner(session: AsyncSession, fleet_partner_id: UUID) -> FleetCompany:
    result = await session.execute(
        select(FleetCompany).where(
            FleetCompany.id == fleet_partner_id,
            FleetCompany.is_deleted == False,
        )
    )
    company = result.scalar_one_or_none()

    if not company:
        raise HTTPException(status_code=404, detail="Fleet partner not found")

    return company


@router.get("", response_model=FleetPartnerListResponse)
async def list_fleet_partners(
    current_user: AdminUser,
    search: Optional[str] = Query(None, max_length=100),
    status: Optional[ReviewStatus] = None,
    document: DocumentFilter = DocumentFilter.ALL,
    session: AsyncSession = Depends(get_async_session),
):
    """
    List fleet partners, newest first.

    - **search**: Matches company name, contact person, email or city
    - **status**: in_review, approved or rejected
    - **document**: all, expired, expiring or valid
    """
    result = await session.execute(
        live_fleet_companies().order_by(FleetCompany.created_at.desc())
    )
    rows = [build_fleet_partner_row(company) for company in result.scalars().all()]

    entity_filter = EntityFilter.for_kind(
        EntityKind.FLEET_PARTNER,
        search=search or "",
        status=status or ALL,
        document=document,
    )
    items = entity_filter.apply(rows)

    return FleetPartnerListResponse(
        items=items,
        total=len(items),
        status_counts=StatusCounts(**count_by_status(rows)),
        document_counts=DocumentBucketCountsSchema.from_counts(count_document_buckets(rows)),
    )


@router.get("/{fleet_partner_id}", response_model=FleetPartnerDetail)
async def get_fleet_partner(
    fleet_partner_id: UUID,
    current_user: Annotated[User, Depends(require_roles(UserRole.ADMIN, UserRole.FLEET_COMPANY))],
    session: AsyncSession = Depends(get_async_session),
):
    """Get a fleet partner with documents, drivers and vehicles."""
    if (
        current_user.role == UserRole.FLEET_COMPANY
        and current_user.fleet_company_id != fleet_partner_id
    ):
        raise HTTPException(status_code=403, detail="Not enough permissions")

    company = await _get_fleet_partner(session, fleet_partner_id)
    return build_fleet_partner_detail(company)


@router.put("/{fleet_partner_id}/status", response_model=StatusChangeResponse)
async def change_fleet_partner_status(
    fleet_partner_id: UUID,
    data: StatusChangeRequest,
    current_user: AdminUser,
    session: AsyncSession = Depends(get_async_session),
):
    """Approve, reject or send a fleet partner back to review."""
    company = await _get_fleet_partner(session, fleet_partner_id)
    previous = apply_status_change(company, data.status, data.status_description)

    notification = status_change_notification(
        EntityKind.FLEET_PARTNER, company, ReviewStatus(data.status), data.status_description
    )
    if notification is not None:
        session.add(notification)

    await session.flush()

    return StatusChangeResponse(
        id=company.id,
        entity=EntityKind.FLEET_PARTNER,
        status=company.status,
        status_description=company.status_description,
        previous_status=previous,
    )


@router.delete("/{fleet_partner_id}", status_code=204)
async def delete_fleet_partner(
    fleet_partner_id: UUID,
    current_user: AdminUser,
    session: AsyncSession = Depends(get_async_session),
):
    """Soft-delete a fleet partner."""
    company = await _get_fleet_partner(session, fleet_partner_id)
    company.is_deleted = True
    await session.flush()

    logger.info(f"Fleet partner {fleet_partner_id} deleted by {current_user.email}")
    return Response(status_code=204)
