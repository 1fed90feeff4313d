"""
Driver leave state derivation.
"""
from datetime import datetime, timezone
from typing import Optional, Union

from fleetdesk.models.enums import LeaveState

DateTimeLike = Union[datetime, str]


def _to_datetime(value: DateTimeLike) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    # Naive timestamps are stored as UTC
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def leave_state(
    leave_start: DateTimeLike,
    leave_end: DateTimeLike,
    now: Optional[datetime] = None,
) -> LeaveState:
    """
    Classify a leave period relative to now.

    Both bounds are inclusive. A leave whose end precedes its start is
    never active.
    """
    start = _to_datetime(leave_start)
    end = _to_datetime(leave_end)
    current = _to_datetime(now) if now is not None else datetime.now(timezone.utc)

    if start <= current <= end:
        return LeaveState.ACTIVE
    if current > end:
        return LeaveState.PAST
    return LeaveState.UPCOMING


def active_leave(leaves, now: Optional[datetime] = None):
    """First leave in the history that is currently active, or None."""
    for leave in leaves or ():
        if leave_state(leave.leave_start, leave.leave_end, now) is LeaveState.ACTIVE:
            return leave
    return None
