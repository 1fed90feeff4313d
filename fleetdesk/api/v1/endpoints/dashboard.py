"""
Admin dashboard counters and the review queue.
"""
from fastapi import APIRouter, Depends
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from fleetdesk.core.dependencies import AdminUser
from fleetdesk.db.database import get_async_session
from fleetdesk.models import Driver, FleetCompany, Notification, Trip, Vehicle
from fleetdesk.models.enums import ReviewStatus, TripStatus, UserRole
from fleetdesk.schemas.dashboard import DashboardStats, EntityStats, PendingApprovals, TripStats
from fleetdesk.schemas.document import DocumentBucketCountsSchema
from fleetdesk.schemas.status import StatusCounts
from fleetdesk.services.detail import (
    build_driver_row,
    build_fleet_partner_row,
    build_vehicle_row,
)
from fleetdesk.services.expiry import count_document_buckets
from fleetdesk.services.filters import count_by_status
from fleetdesk.services.queries import live_drivers, live_fleet_companies, live_vehicles

router = APIRouter()


def _entity_stats(entities: list) -> EntityStats:
    return EntityStats(
        total=len(entities),
        status_counts=StatusCounts(**count_by_status(entities)),
        document_counts=DocumentBucketCountsSchema.from_counts(
            count_document_buckets(entities)
        ),
    )


def _in_review(model):
    # NULL status reads as in_review
    return or_(model.status == ReviewStatus.IN_REVIEW, model.status.is_(None))


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    current_user: AdminUser,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Review and document counters per entity type, trip counters by status.

    Each entity lands in at most one document bucket (expired wins over
    expiring; entities without dated documents are in none). Deleted drivers
    and fleet partners, and the vehicles of deleted drivers, are not counted.
    """
    drivers = await session.execute(live_drivers())
    vehicles = await session.execute(live_vehicles())
    companies = await session.execute(live_fleet_companies())

    trip_rows = await session.execute(
        select(Trip.trip_status, func.count(Trip.id)).group_by(Trip.trip_status)
    )
    trip_counts = {TripStatus(status).value: count for status, count in trip_rows.all()}

    unread = await session.scalar(
        select(func.count(Notification.id)).where(
            Notification.recipient_role == UserRole.ADMIN,
            Notification.is_read == False,
        )
    )

    return DashboardStats(
        drivers=_entity_stats(drivers.scalars().all()),
        vehicles=_entity_stats(vehicles.scalars().all()),
        fleet_partners=_entity_stats(companies.scalars().all()),
        trips=TripStats(total=sum(trip_counts.values()), **trip_counts),
        unread_notifications=unread or 0,
    )


@router.get("/pending-approvals", response_model=PendingApprovals)
async def get_pending_approvals(
    current_user: AdminUser,
    session: AsyncSession = Depends(get_async_session),
):
    """Drivers, vehicles and fleet partners waiting for review, oldest first."""
    drivers = await session.execute(
        live_drivers().where(_in_review(Driver)).order_by(Driver.created_at.asc())
    )
    vehicles = await session.execute(
        live_vehicles().where(_in_review(Vehicle)).order_by(Vehicle.created_at.asc())
    )
    companies = await session.execute(
        live_fleet_companies()
        .where(_in_review(FleetCompany))
        .order_by(FleetCompany.created_at.asc())
    )

    driver_rows = [build_driver_row(driver) for driver in drivers.scalars().all()]
    vehicle_rows = [build_vehicle_row(vehicle) for vehicle in vehicles.scalars().all()]
    company_rows = [build_fleet_partner_row(company) for company in companies.scalars().all()]

    return PendingApprovals(
        drivers=driver_rows,
        vehicles=vehicle_rows,
        fleet_partners=company_rows,
        total=len(driver_rows) + len(vehicle_rows) + len(company_rows),
    )
