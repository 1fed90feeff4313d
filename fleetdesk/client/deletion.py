"""
Two-step delete confirmation.

    idle -> pending_first_confirm -> pending_final_confirm -> deleting -> deleted

cancel() from either pending stage returns to idle; a failed delete returns
to idle and notifies.
"""
from enum import Enum
from typing import Awaitable, Callable, Optional
import logging

from fleetdesk.client.api import ApiError
from fleetdesk.client.notifier import Notifier

logger = logging.getLogger(__name__)


class DeleteStage(str, Enum):
    IDLE = "idle"
    PENDING_FIRST_CONFIRM = "pending_first_confirm"
    PENDING_FINAL_CONFIRM = "pending_final_confirm"
    DELETING = "deleting"
    DELETED = "deleted"


class DeleteStateError(Exception):
    """Raised when an action is not valid in the current stage."""


class DeleteConfirmation:
    """
    Delete flow of one detail view.

    Args:
        delete: Coroutine function performing the delete request
        notifier: Receives success and error messages
        label: Name of the record in messages (e.g. "Driver")
        on_deleted: Called once after a successful delete (e.g. navigate back)
    """

    def __init__(
        self,
        delete: Callable[[], Awaitable[None]],
        notifier: Notifier,
        label: str = "Record",
        on_deleted: Optional[Callable[[], None]] = None,
    ) -> None:
        self._delete = delete
        self.notifier = notifier
        self.label = label
        self.on_deleted = on_deleted
        self.stage = DeleteStage.IDLE

    def _expect(self, *stages: DeleteStage) -> None:
        if self.stage not in stages:
            raise DeleteStateError(f"Cannot do that while {self.stage.value}")

    def request(self) -> DeleteStage:
        """First click on delete."""
        self._expect(DeleteStage.IDLE)
        self.stage = DeleteStage.PENDING_FIRST_CONFIRM
        return self.stage

    def confirm(self) -> DeleteStage:
        """First confirmation; asks for the final one."""
        self._expect(DeleteStage.PENDING_FIRST_CONFIRM)
        self.stage = DeleteStage.PENDING_FINAL_CONFIRM
        return self.stage

    def cancel(self) -> DeleteStage:
        self._expect(DeleteStage.PENDING_FIRST_CONFIRM, DeleteStage.PENDING_FINAL_CONFIRM)
        self.stage = DeleteStage.IDLE
        return self.stage

    async def confirm_final(self) -> DeleteStage:
        """Final confirmation; performs the delete."""
        self._expect(DeleteStage.PENDING_FINAL_CONFIRM)
        self.stage = DeleteStage.DELETING

        try:
            await self._delete()
        except ApiError as e:
            logger.error(f"Delete of {self.label} failed: {e}")
            self.stage = DeleteStage.IDLE
            self.notifier.error(f"Failed to delete {self.label.lower()}")
            return self.stage

        self.stage = DeleteStage.DELETED
        self.notifier.success(f"{self.label} deleted successfully")
        if self.on_deleted is not None:
            self.on_deleted()
        return self.stage
