"""Dashboard counter schemas."""
from fleetdesk.schemas.base import BaseSchema
from fleetdesk.schemas.document import DocumentBucketCountsSchema
from fleetdesk.schemas.driver import DriverRow
from fleetdesk.schemas.fleet_company import FleetPartnerRow
from fleetdesk.schemas.status import StatusCounts
from fleetdesk.schemas.vehicle import VehicleRow


class EntityStats(BaseSchema):
    """Counters of one reviewable entity type."""
    total: int = 0
    status_counts: StatusCounts
    document_counts: DocumentBucketCountsSchema


class TripStats(BaseSchema):
    """Trip counters by trip status."""
    total: int = 0
    upcoming: int = 0
    running: int = 0
    completed: int = 0
    canceled: int = 0


class DashboardStats(BaseSchema):
    """GET /dashboard/stats response."""
    drivers: EntityStats
    vehicles: EntityStats
    fleet_partners: EntityStats
    trips: TripStats
    unread_notifications: int = 0


class PendingApprovals(BaseSchema):
    """Records waiting for review, oldest first."""
    drivers: list[DriverRow]
    vehicles: list[VehicleRow]
    fleet_partners: list[FleetPartnerRow]
    total: int = 0
