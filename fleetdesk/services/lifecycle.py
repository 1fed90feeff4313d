"""
Review status lifecycle shared by drivers, vehicles and fleet companies.

Three states, every transition allowed. The only policy is whether a
reason must be captured before writing, which depends on where the change
was requested from:

    target      list view   detail view
    approved    no          no
    rejected    yes         no
    in_review   yes         no
"""
from enum import Enum
from typing import Any, Optional, Union
import logging

from fleetdesk.models.enums import ReviewStatus

logger = logging.getLogger(__name__)


class InvalidStatusError(ValueError):
    """Raised when a value is not one of the review states."""


class ReasonRequiredError(ValueError):
    """Raised when a transition needs a reason and none was given."""


class TransitionOrigin(str, Enum):
    """Where a status change was requested from."""
    LIST = "list"
    DETAIL = "detail"


def normalize_status(value: Union[ReviewStatus, str, None]) -> ReviewStatus:
    """Map a stored status to a ReviewStatus; NULL or empty means IN_REVIEW."""
    if value is None or value == "":
        return ReviewStatus.IN_REVIEW
    if isinstance(value, ReviewStatus):
        return value
    try:
        return ReviewStatus(value)
    except ValueError:
        raise InvalidStatusError(f"Unknown review status: {value!r}") from None


def parse_target(value: Union[ReviewStatus, str, None]) -> ReviewStatus:
    """Validate a requested target status. Unlike stored values, None is invalid."""
    if value is None or value == "":
        raise InvalidStatusError("Target status is required")
    return normalize_status(value)


def clean_reason(reason: Optional[str]) -> Optional[str]:
    """Trim a reason; blank becomes None."""
    if reason is None:
        return None
    cleaned = reason.strip()
    return cleaned or None


def requires_reason(
    target: Union[ReviewStatus, str],
    origin: Union[TransitionOrigin, str] = TransitionOrigin.LIST,
) -> bool:
    """Whether the reason prompt must be filled before the write is issued."""
    if TransitionOrigin(origin) is TransitionOrigin.DETAIL:
        return False
    return parse_target(target) is not ReviewStatus.APPROVED


def validate_transition(
    target: Union[ReviewStatus, str],
    reason: Optional[str] = None,
    origin: Union[TransitionOrigin, str] = TransitionOrigin.LIST,
) -> tuple[ReviewStatus, Optional[str]]:
    """
    Check a transition request before any write.

    Returns:
        (target status, cleaned reason)

    Raises:
        InvalidStatusError: target is not a review state
        ReasonRequiredError: the origin requires a reason and it is blank
    """
    status = parse_target(target)
    cleaned = clean_reason(reason)
    if cleaned is None and requires_reason(status, origin):
        raise ReasonRequiredError(
            f"A reason is required to mark this record as {status.label.lower()}"
        )
    return status, cleaned


def available_transitions(current: Union[ReviewStatus, str, None]) -> dict[ReviewStatus, bool]:
    """Enabled flag per action; the action matching the current status is disabled."""
    normalized = normalize_status(current)
    return {status: status is not normalized for status in ReviewStatus}


def apply_status_change(
    entity: Any,
    target: Union[ReviewStatus, str],
    description: Optional[str] = None,
) -> ReviewStatus:
    """
    Write a new status onto a reviewable record.

    status_description is only overwritten when a description is supplied.
    Setting the current status again is allowed.

    Returns:
        The previous (normalized) status
    """
    status = parse_target(target)
    previous = normalize_status(entity.status)
    entity.status = status

    cleaned = clean_reason(description)
    if cleaned is not None:
        entity.status_description = cleaned

    logger.info(
        f"{type(entity).__name__} {entity.id} status {previous.value} -> {status.value}"
    )
    return previous


def force_review(entity: Any, cause: str) -> bool:
    """
    Send a record back to IN_REVIEW after a self-service edit.

    Returns:
        True if the status actually changed
    """
    previous = normalize_status(entity.status)
    entity.status = ReviewStatus.IN_REVIEW
    if previous is not ReviewStatus.IN_REVIEW:
        logger.info(
            f"{type(entity).__name__} {entity.id} returned to review after {cause}"
        )
        return True
    return False
