"""
Client-side status lifecycle controller.

Validates a requested transition locally and issues at most one status
write. Nothing is retried and no local state is touched: callers refetch
after a successful change.
"""
from dataclasses import dataclass
from typing import Any, Optional, Union
from uuid import UUID
import logging

from fleetdesk.client.api import AdminAPI, ApiError
from fleetdesk.models.enums import EntityKind, ReviewStatus
from fleetdesk.services.lifecycle import (
    TransitionOrigin,
    clean_reason,
    parse_target,
    requires_reason,
    validate_transition,
)

logger = logging.getLogger(__name__)


class TransitionFailedError(Exception):
    """The backend rejected the status write or could not be reached."""

    def __init__(self, message: str, cause: ApiError) -> None:
        self.cause = cause
        super().__init__(message)


@dataclass
class ReasonPrompt:
    """
    Reason capture shown before a transition that needs one.

    submit stays disabled while the trimmed reason is empty.
    """
    entity_id: Union[UUID, str]
    target: ReviewStatus
    origin: TransitionOrigin = TransitionOrigin.LIST
    reason: str = ""

    @property
    def required(self) -> bool:
        return requires_reason(self.target, self.origin)

    @property
    def can_submit(self) -> bool:
        return not self.required or clean_reason(self.reason) is not None


class StatusLifecycleController:
    """Status writes for one entity type."""

    def __init__(self, api: AdminAPI, kind: Union[EntityKind, str]) -> None:
        self.api = api
        self.kind = EntityKind(kind)

    def prompt_for(
        self,
        entity_id: Union[UUID, str],
        target: Union[ReviewStatus, str],
        origin: Union[TransitionOrigin, str] = TransitionOrigin.LIST,
    ) -> Optional[ReasonPrompt]:
        """ReasonPrompt when the transition needs a reason, None when it can go straight through."""
        status = parse_target(target)
        origin = TransitionOrigin(origin)
        if not requires_reason(status, origin):
            return None
        return ReasonPrompt(entity_id=entity_id, target=status, origin=origin)

    async def request_transition(
        self,
        entity_id: Union[UUID, str],
        target: Union[ReviewStatus, str],
        reason: Optional[str] = None,
        origin: Union[TransitionOrigin, str] = TransitionOrigin.LIST,
    ) -> Any:
        """
        Validate and write a status change.

        Returns:
            The server payload

        Raises:
            InvalidStatusError: target is not a review state (no request made)
            ReasonRequiredError: reason needed but blank (no request made)
            TransitionFailedError: the single request failed
        """
        status, cleaned = validate_transition(target, reason, origin)

        try:
            payload = await self.api.update_status(self.kind, entity_id, status.value, cleaned)
        except ApiError as e:
            logger.error(f"{self.kind.label} {entity_id} transition to {status.value} failed: {e}")
            raise TransitionFailedError(
                f"Failed to update {self.kind.label.lower()} status", e
            ) from e

        logger.info(f"{self.kind.label} {entity_id} {status.past_tense}")
        return payload

    async def submit(self, prompt: ReasonPrompt) -> Any:
        """Send a filled-in ReasonPrompt."""
        return await self.request_transition(
            prompt.entity_id, prompt.target, prompt.reason, prompt.origin
        )
