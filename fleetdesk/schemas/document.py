"""
Document Pydantic schemas.

Every document response carries its expiry classification so clients never
re-derive it.
"""
from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from fleetdesk.models.enums import (
    DocumentBucket,
    DriverDocumentType,
    ExpiryClass,
    FleetCompanyDocumentType,
    VehicleDocumentType,
)
from fleetdesk.services.expiry import DocumentBucketCounts, DocumentSummary, ExpiryStatus
from fleetdesk.schemas.base import BaseSchema, IDSchema, TimestampSchema


class ExpiryStatusSchema(BaseSchema):
    """Expiry class, day count and badge text of one document."""
    status: ExpiryClass
    days: Optional[int] = None
    label: Optional[str] = None

    @classmethod
    def from_status(cls, expiry: ExpiryStatus) -> "ExpiryStatusSchema":
        return cls(status=expiry.status, days=expiry.days, label=expiry.label)


class DocumentResponse(IDSchema, TimestampSchema):
    """Document of any owner type."""
    document_type: str
    document_number: Optional[str] = None
    document_expiry_date: Optional[date] = None
    document_url: Optional[str] = None
    expiry: ExpiryStatusSchema


class DocumentUploadBase(BaseSchema):
    """Metadata of an already stored document file."""
    document_number: Optional[str] = Field(None, max_length=100)
    document_expiry_date: Optional[date] = None
    document_url: str = Field(..., min_length=1, max_length=500)

    @field_validator("document_number")
    @classmethod
    def strip_number(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class DriverDocumentUpload(DocumentUploadBase):
    """Driver document upload."""
    document_type: DriverDocumentType


class VehicleDocumentUpload(DocumentUploadBase):
    """Vehicle document upload."""
    document_type: VehicleDocumentType


class FleetCompanyDocumentUpload(DocumentUploadBase):
    """Fleet company document upload."""
    document_type: FleetCompanyDocumentType


class DocumentSummarySchema(BaseSchema):
    """Per-entity document roll-up."""
    has_expired: bool = False
    has_expiring: bool = False
    expired_count: int = 0
    expiring_count: int = 0
    valid_count: int = 0
    unknown_count: int = 0
    bucket: DocumentBucket = DocumentBucket.NONE

    @classmethod
    def from_summary(cls, summary: DocumentSummary) -> "DocumentSummarySchema":
        return cls(
            has_expired=summary.has_expired,
            has_expiring=summary.has_expiring,
            expired_count=summary.expired_count,
            expiring_count=summary.expiring_count,
            valid_count=summary.valid_count,
            unknown_count=summary.unknown_count,
            bucket=summary.bucket,
        )


class DocumentBucketCountsSchema(BaseSchema):
    """Mutually exclusive document bucket counters."""
    expired: int = 0
    expiring: int = 0
    valid: int = 0

    @classmethod
    def from_counts(cls, counts: DocumentBucketCounts) -> "DocumentBucketCountsSchema":
        return cls(expired=counts.expired, expiring=counts.expiring, valid=counts.valid)
