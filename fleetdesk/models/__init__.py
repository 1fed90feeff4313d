"""
SQLAlchemy ORM Models for FleetDesk.

This module exports all domain models and enums of the fleet back office.
"""

# Enums
from fleetdesk.models.enums import (
    ReviewStatus,
    ExpiryClass,
    DocumentBucket,
    DocumentFilter,
    VehicleDocumentType,
    DriverDocumentType,
    FleetCompanyDocumentType,
    DriverType,
    TripStatus,
    PaymentStatus,
    TripType,
    LeaveState,
    UserRole,
    NotificationType,
    EntityKind,
)

# Base
from fleetdesk.models.base import (
    BaseModel,
    TimestampMixin,
    UUIDPrimaryKeyMixin,
    ReviewableMixin,
    DocumentMixin,
)

# Domain Models
from fleetdesk.models.user import User
from fleetdesk.models.fleet_company import FleetCompany
from fleetdesk.models.driver import Driver
from fleetdesk.models.vehicle import Vehicle
from fleetdesk.models.document import DriverDocument, VehicleDocument, FleetCompanyDocument
from fleetdesk.models.leave import DriverLeave
from fleetdesk.models.trip import Trip, TripStop
from fleetdesk.models.notification import Notification

__all__ = [
    # Enums
    "ReviewStatus",
    "ExpiryClass",
    "DocumentBucket",
    "DocumentFilter",
    "VehicleDocumentType",
    "DriverDocumentType",
    "FleetCompanyDocumentType",
    "DriverType",
    "TripStatus",
    "PaymentStatus",
    "TripType",
    "LeaveState",
    "UserRole",
    "NotificationType",
    "EntityKind",
    # Base
    "BaseModel",
    "TimestampMixin",
    "UUIDPrimaryKeyMixin",
    "ReviewableMixin",
    "DocumentMixin",
    # Domain Models
    "User",
    "FleetCompany",
    "Driver",
    "Vehicle",
    "DriverDocument",
    "VehicleDocument",
    "FleetCompanyDocument",
    "DriverLeave",
    "Trip",
    "TripStop",
    "Notification",
]
