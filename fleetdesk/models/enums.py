"""
Enum type definitions for FleetDesk.

Values are the lowercase strings used on the wire and in PostgreSQL ENUM types.
"""
from enum import Enum


class ReviewStatus(str, Enum):
    """
    Approval state shared by drivers, vehicles and fleet companies.

    Every state can move to every other state. A NULL status in storage
    means IN_REVIEW.
    """
    IN_REVIEW = "in_review"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def label(self) -> str:
        """Human-readable badge text."""
        return {
            ReviewStatus.IN_REVIEW: "In Review",
            ReviewStatus.APPROVED: "Approved",
            ReviewStatus.REJECTED: "Rejected",
        }[self]

    @property
    def past_tense(self) -> str:
        """Verb phrase used in confirmation messages."""
        return {
            ReviewStatus.IN_REVIEW: "marked as in review",
            ReviewStatus.APPROVED: "approved",
            ReviewStatus.REJECTED: "rejected",
        }[self]


class ExpiryClass(str, Enum):
    """
    Classification of a document's expiry date relative to today.

    TODAY and EXPIRING are both "needs attention soon" for counters;
    UNKNOWN (no expiry date) never counts as VALID.
    """
    UNKNOWN = "unknown"
    EXPIRED = "expired"
    TODAY = "today"
    EXPIRING = "expiring"
    VALID = "valid"

    @property
    def needs_attention(self) -> bool:
        """Whether the class is in the expiring-soon bucket."""
        return self in (ExpiryClass.TODAY, ExpiryClass.EXPIRING)


class DocumentBucket(str, Enum):
    """Mutually exclusive per-entity document roll-up used by dashboards."""
    EXPIRED = "expired"
    EXPIRING = "expiring"
    VALID = "valid"
    NONE = "none"


class DocumentFilter(str, Enum):
    """Document filter values offered by list views."""
    ALL = "all"
    EXPIRED = "expired"
    EXPIRING = "expiring"
    VALID = "valid"


class VehicleDocumentType(str, Enum):
    """Vehicle paperwork."""
    REGISTRATION = "registration"
    INSURANCE = "insurance"
    FITNESS = "fitness"
    PERMIT = "permit"
    POLLUTION = "pollution"


class DriverDocumentType(str, Enum):
    """Driver paperwork."""
    DRIVING_LICENSE = "driving_license"
    IDENTITY_PROOF = "identity_proof"
    ADDRESS_PROOF = "address_proof"
    POLICE_VERIFICATION = "police_verification"
    MEDICAL_CERTIFICATE = "medical_certificate"


class FleetCompanyDocumentType(str, Enum):
    """Fleet company paperwork."""
    BUSINESS_LICENSE = "business_license"
    TAX_REGISTRATION = "tax_registration"
    INSURANCE_POLICY = "insurance_policy"
    OPERATING_PERMIT = "operating_permit"


class DriverType(str, Enum):
    """How a driver registered."""
    INDIVIDUAL = "individual"
    FLEET_PARTNER = "fleet_partner"


class TripStatus(str, Enum):
    """Trip lifecycle status."""
    UPCOMING = "upcoming"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELED = "canceled"


class PaymentStatus(str, Enum):
    """Trip payment status (display only)."""
    PENDING = "pending"
    COMPLETED = "completed"


class TripType(str, Enum):
    """Trip shape."""
    SINGLE_TRIP = "single_trip"
    ROUND_TRIP = "round_trip"
    MULTI_STOP = "multi_stop"


class LeaveState(str, Enum):
    """Derived state of a driver leave relative to now."""
    ACTIVE = "active"
    PAST = "past"
    UPCOMING = "upcoming"


class UserRole(str, Enum):
    """Account roles gating back-office views."""
    ADMIN = "admin"
    DRIVER = "driver"
    FLEET_COMPANY = "fleet_company"


class NotificationType(str, Enum):
    """Notification kinds raised by the back office."""
    DOCUMENT_EXPIRED = "document_expired"
    DOCUMENT_EXPIRING = "document_expiring"
    STATUS_CHANGED = "status_changed"


class EntityKind(str, Enum):
    """Record types that go through the review workflow."""
    DRIVER = "driver"
    VEHICLE = "vehicle"
    FLEET_PARTNER = "fleet_partner"

    @property
    def label(self) -> str:
        return {
            EntityKind.DRIVER: "Driver",
            EntityKind.VEHICLE: "Vehicle",
            EntityKind.FLEET_PARTNER: "Fleet partner",
        }[self]
