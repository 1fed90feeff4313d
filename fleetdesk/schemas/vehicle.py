"""
Vehicle Pydantic schemas.
"""
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from fleetdesk.models.enums import ReviewStatus
from fleetdesk.schemas.base import BaseSchema, IDSchema, TimestampSchema
from fleetdesk.schemas.document import (
    DocumentBucketCountsSchema,
    DocumentResponse,
    DocumentSummarySchema,
)
from fleetdesk.schemas.status import StatusCounts


class VehicleSummary(IDSchema):
    """Vehicle nested in driver and fleet partner details."""
    car_name: str
    car_number: str
    car_type: Optional[str] = None
    status: ReviewStatus = ReviewStatus.IN_REVIEW


class VehicleRow(VehicleSummary, TimestampSchema):
    """Vehicle list row."""
    car_size: Optional[str] = None
    car_image: Optional[str] = None
    owner_name: Optional[str] = None
    driver_id: Optional[UUID] = None
    fleet_company_id: Optional[UUID] = None
    status_description: Optional[str] = None
    documents: list[DocumentResponse] = Field(default_factory=list)
    document_summary: DocumentSummarySchema = Field(default_factory=DocumentSummarySchema)


class VehicleDetail(VehicleRow):
    """Vehicle with features, capacity and condition."""
    bus_capacity: Optional[int] = None
    vehicle_age: Optional[int] = None
    vehicle_condition: Optional[str] = None
    wheelchair_accessible: bool = False
    features: list[str] = Field(default_factory=list)


class VehicleListResponse(BaseSchema):
    """Vehicle list with header counters."""
    items: list[VehicleRow]
    total: int
    status_counts: StatusCounts
    document_counts: DocumentBucketCountsSchema


class DriverVehicleUpdate(BaseSchema):
    """Self-service vehicle edit; any change sends the vehicle back to review."""
    car_name: Optional[str] = Field(None, min_length=1, max_length=100)
    car_type: Optional[str] = Field(None, max_length=50)
    car_size: Optional[str] = Field(None, max_length=50)
    bus_capacity: Optional[int] = Field(None, ge=0)
    vehicle_age: Optional[int] = Field(None, ge=0)
    vehicle_condition: Optional[str] = Field(None, max_length=50)
    wheelchair_accessible: Optional[bool] = None
    features: Optional[list[str]] = None

    @field_validator("features")
    @classmethod
    def clean_features(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        """Drop blanks and duplicates, keeping order."""
        if value is None:
            return None
        cleaned: list[str] = []
        for feature in value:
            feature = feature.strip()
            if feature and feature not in cleaned:
                cleaned.append(feature)
        return cleaned


class VehiclePhotoUpdate(BaseSchema):
    """URL of an already stored vehicle photo."""
    car_image: str = Field(..., min_length=1, max_length=500)
