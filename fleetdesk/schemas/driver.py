"""
Driver Pydantic schemas.
"""
from typing import Optional
from uuid import UUID

from pydantic import Field

from fleetdesk.models.enums import DriverType, ReviewStatus
from fleetdesk.schemas.base import BaseSchema, IDSchema, TimestampSchema
from fleetdesk.schemas.document import (
    DocumentBucketCountsSchema,
    DocumentResponse,
    DocumentSummarySchema,
)
from fleetdesk.schemas.leave import LeaveResponse
from fleetdesk.schemas.status import StatusCounts
from fleetdesk.schemas.trip import TripSummary
from fleetdesk.schemas.vehicle import VehicleSummary


class DriverSummary(IDSchema):
    """Driver nested in fleet partner details."""
    full_name: str
    email: str
    phone_no: Optional[str] = None
    status: ReviewStatus = ReviewStatus.IN_REVIEW


class DriverRow(DriverSummary, TimestampSchema):
    """Driver list row."""
    firstname: str
    lastname: str
    gender: Optional[str] = None
    city_name: Optional[str] = None
    year_of_experience: int = 0
    driver_type: DriverType = DriverType.INDIVIDUAL
    fleet_company_id: Optional[UUID] = None
    fleet_company_name: Optional[str] = None
    profile_image: Optional[str] = None
    status_description: Optional[str] = None
    documents: list[DocumentResponse] = Field(default_factory=list)
    document_summary: DocumentSummarySchema = Field(default_factory=DocumentSummarySchema)


class DriverDetail(DriverRow):
    """Driver with vehicles, trips and leave history."""
    address: Optional[str] = None
    zip_code: Optional[str] = None
    vehicles: list[VehicleSummary] = Field(default_factory=list)
    trips: list[TripSummary] = Field(default_factory=list)
    leave_history: list[LeaveResponse] = Field(default_factory=list)
    active_leave: Optional[LeaveResponse] = None


class DriverListResponse(BaseSchema):
    """Driver list with header counters."""
    items: list[DriverRow]
    total: int
    status_counts: StatusCounts
    document_counts: DocumentBucketCountsSchema


class DriverProfileUpdate(BaseSchema):
    """Self-service profile edit; any change sends the driver back to review."""
    firstname: Optional[str] = Field(None, min_length=1, max_length=50)
    lastname: Optional[str] = Field(None, min_length=1, max_length=50)
    email: Optional[str] = Field(None, max_length=100)
    phone_no: Optional[str] = Field(None, max_length=20)
    gender: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = None
    city_name: Optional[str] = Field(None, max_length=100)
    zip_code: Optional[str] = Field(None, max_length=20)
    year_of_experience: Optional[int] = Field(None, ge=0)


class ProfilePhotoUpdate(BaseSchema):
    """URL of an already stored profile photo."""
    profile_image: str = Field(..., min_length=1, max_length=500)
