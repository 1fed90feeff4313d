"""
Review status schemas.
"""
from typing import Optional
from uuid import UUID

from pydantic import Field

from fleetdesk.models.enums import EntityKind, ReviewStatus
from fleetdesk.schemas.base import BaseSchema


class StatusChangeRequest(BaseSchema):
    """Body of PUT /{entity}/{id}/status."""
    status: ReviewStatus
    status_description: Optional[str] = Field(
        None,
        max_length=500,
        description="Reason for the change; kept unchanged when omitted",
    )


class StatusChangeResponse(BaseSchema):
    """Entity status after a transition."""
    id: UUID
    entity: EntityKind
    status: ReviewStatus
    status_description: Optional[str] = None
    previous_status: ReviewStatus


class StatusCounts(BaseSchema):
    """Header counters of a list view."""
    approved: int = 0
    in_review: int = 0
    rejected: int = 0


class SelfServiceResponse(BaseSchema):
    """
    Result of a driver self-service edit.

    The edit sends the record back to review; clients always refetch.
    """
    entity: EntityKind
    id: UUID
    status: ReviewStatus = ReviewStatus.IN_REVIEW
    requires_refetch: bool = True
    message: str
