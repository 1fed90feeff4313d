"""Driver leave schemas."""
from datetime import datetime
from typing import Optional

from fleetdesk.models.enums import LeaveState
from fleetdesk.schemas.base import BaseSchema, IDSchema


class LeaveResponse(IDSchema):
    """Leave period with its state derived at read time."""
    leave_start: datetime
    leave_end: datetime
    leave_reason: Optional[str] = None
    state: LeaveState
