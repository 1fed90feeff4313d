"""
Pydantic schemas for API request/response validation.
"""

from fleetdesk.schemas.base import BaseSchema
from fleetdesk.schemas.auth import CurrentUser, Token, TokenData, UserLogin
from fleetdesk.schemas.document import (
    ExpiryStatusSchema,
    DocumentResponse,
    DriverDocumentUpload,
    VehicleDocumentUpload,
    FleetCompanyDocumentUpload,
    DocumentSummarySchema,
    DocumentBucketCountsSchema,
)
from fleetdesk.schemas.status import (
    StatusChangeRequest,
    StatusChangeResponse,
    StatusCounts,
    SelfServiceResponse,
)
from fleetdesk.schemas.leave import LeaveResponse
from fleetdesk.schemas.trip import (
    TripStopResponse,
    TripSummary,
    TripDetail,
    TripStatusUpdate,
    TripListResponse,
)
from fleetdesk.schemas.vehicle import (
    VehicleSummary,
    VehicleRow,
    VehicleDetail,
    VehicleListResponse,
    DriverVehicleUpdate,
    VehiclePhotoUpdate,
)
from fleetdesk.schemas.driver import (
    DriverSummary,
    DriverRow,
    DriverDetail,
    DriverListResponse,
    DriverProfileUpdate,
    ProfilePhotoUpdate,
)
from fleetdesk.schemas.fleet_company import (
    FleetPartnerRow,
    FleetPartnerDetail,
    FleetPartnerListResponse,
)
from fleetdesk.schemas.dashboard import DashboardStats, EntityStats, PendingApprovals, TripStats
from fleetdesk.schemas.notification import (
    NotificationResponse,
    NotificationListResponse,
    NotificationReadAllResponse,
)
from fleetdesk.schemas.payout import PayoutLineResponse, PayoutSummaryResponse

__all__ = [
    # Base
    "BaseSchema",
    # Auth
    "CurrentUser",
    "Token",
    "TokenData",
    "UserLogin",
    # Documents
    "ExpiryStatusSchema",
    "DocumentResponse",
    "DriverDocumentUpload",
    "VehicleDocumentUpload",
    "FleetCompanyDocumentUpload",
    "DocumentSummarySchema",
    "DocumentBucketCountsSchema",
    # Status
    "StatusChangeRequest",
    "StatusChangeResponse",
    "StatusCounts",
    "SelfServiceResponse",
    # Leave
    "LeaveResponse",
    # Trip
    "TripStopResponse",
    "TripSummary",
    "TripDetail",
    "TripStatusUpdate",
    "TripListResponse",
    # Vehicle
    "VehicleSummary",
    "VehicleRow",
    "VehicleDetail",
    "VehicleListResponse",
    "DriverVehicleUpdate",
    "VehiclePhotoUpdate",
    # Driver
    "DriverSummary",
    "DriverRow",
    "DriverDetail",
    "DriverListResponse",
    "DriverProfileUpdate",
    "ProfilePhotoUpdate",
    # Fleet partner
    "FleetPartnerRow",
    "FleetPartnerDetail",
    "FleetPartnerListResponse",
    # Dashboard
    "DashboardStats",
    "EntityStats",
    "PendingApprovals",
    "TripStats",
    # Notifications
    "NotificationResponse",
    "NotificationListResponse",
    "NotificationReadAllResponse",
    # Payouts
    "PayoutLineResponse",
    "PayoutSummaryResponse",
]
