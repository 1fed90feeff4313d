"""
Fleet partner (fleet company) Pydantic schemas.
"""
from typing import Optional

from pydantic import Field

from fleetdesk.models.enums import ReviewStatus
from fleetdesk.schemas.base import BaseSchema, IDSchema, TimestampSchema
from fleetdesk.schemas.document import (
    DocumentBucketCountsSchema,
    DocumentResponse,
    DocumentSummarySchema,
)
from fleetdesk.schemas.driver import DriverSummary
from fleetdesk.schemas.status import StatusCounts
from fleetdesk.schemas.vehicle import VehicleSummary


class FleetPartnerRow(IDSchema, TimestampSchema):
    """Fleet partner list row."""
    company_name: str
    email: str
    phone_no: Optional[str] = None
    city_name: Optional[str] = None
    contact_person_name: Optional[str] = None
    fleet_size: int = 0
    status: ReviewStatus = ReviewStatus.IN_REVIEW
    status_description: Optional[str] = None
    documents: list[DocumentResponse] = Field(default_factory=list)
    document_summary: DocumentSummarySchema = Field(default_factory=DocumentSummarySchema)


class FleetPartnerDetail(FleetPartnerRow):
    """Fleet partner with its drivers and vehicles."""
    legal_entity_type: Optional[str] = None
    business_address: Optional[str] = None
    contact_person_position: Optional[str] = None
    years_experience: int = 0
    drivers: list[DriverSummary] = Field(default_factory=list)
    vehicles: list[VehicleSummary] = Field(default_factory=list)


class FleetPartnerListResponse(BaseSchema):
    """Fleet partner list with header counters."""
    items: list[FleetPartnerRow]
    total: int
    status_counts: StatusCounts
    document_counts: DocumentBucketCountsSchema
