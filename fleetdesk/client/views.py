"""
Client view models for the back office.

List views hold the full fetched collection and filter it locally; detail
views fetch one record and expose its status actions and delete flow. Both
refetch after every successful mutation instead of patching local state.
"""
from dataclasses import replace
from typing import Any, Callable, Optional, Union
from uuid import UUID
import logging

from fleetdesk.client.api import AdminAPI, ApiError, DriverAPI
from fleetdesk.client.deletion import DeleteConfirmation
from fleetdesk.client.lifecycle import StatusLifecycleController, TransitionFailedError
from fleetdesk.client.notifier import Notifier
from fleetdesk.models.enums import DocumentFilter, EntityKind, ReviewStatus
from fleetdesk.services.expiry import DocumentBucketCounts, count_document_buckets
from fleetdesk.services.filters import EntityFilter, count_by_status
from fleetdesk.services.lifecycle import (
    InvalidStatusError,
    ReasonRequiredError,
    TransitionOrigin,
    available_transitions,
    normalize_status,
    parse_target,
)

logger = logging.getLogger(__name__)


class EntityListView:
    """List of drivers, vehicles or fleet partners with local filters."""

    def __init__(
        self,
        api: AdminAPI,
        kind: Union[EntityKind, str],
        notifier: Notifier,
        controller: Optional[StatusLifecycleController] = None,
    ) -> None:
        self.api = api
        self.kind = EntityKind(kind)
        self.notifier = notifier
        self.controller = controller or StatusLifecycleController(api, self.kind)
        self.entities: list[dict] = []
        self.filter = EntityFilter.for_kind(self.kind)
        self.loading = False

    async def load(self) -> list[dict]:
        """Fetch the whole collection; on failure the list is empty."""
        self.loading = True
        try:
            payload = await self.api.list_entities(self.kind)
            self.entities = list(payload.get("items", []))
        except ApiError as e:
            logger.error(f"Loading {self.kind.value} list failed: {e}")
            self.entities = []
            self.notifier.error(f"Failed to load {self.kind.label.lower()} list")
        finally:
            self.loading = False
        return self.entities

    # Filters
    def set_search(self, search: str) -> None:
        self.filter = replace(self.filter, search=search)

    def set_status(self, status: Union[ReviewStatus, str]) -> None:
        self.filter = replace(self.filter, status=status)

    def set_document_filter(self, document: Union[DocumentFilter, str]) -> None:
        self.filter = replace(self.filter, document=document)

    def set_car_type(self, car_type: str) -> None:
        self.filter = replace(self.filter, car_type=car_type)

    @property
    def filtered(self) -> list[dict]:
        return self.filter.apply(self.entities)

    @property
    def status_counts(self) -> dict[str, int]:
        return count_by_status(self.entities)

    @property
    def document_counts(self) -> DocumentBucketCounts:
        return count_document_buckets(self.entities)

    # Status changes
    def begin_status_change(self, entity_id: Union[UUID, str], target: Union[ReviewStatus, str]):
        """ReasonPrompt to show before the change, or None to submit directly."""
        return self.controller.prompt_for(entity_id, target, TransitionOrigin.LIST)

    async def change_status(
        self,
        entity_id: Union[UUID, str],
        target: Union[ReviewStatus, str],
        reason: Optional[str] = None,
    ) -> bool:
        """Write a status change from the list and refetch on success."""
        try:
            await self.controller.request_transition(
                entity_id, target, reason, TransitionOrigin.LIST
            )
        except (InvalidStatusError, ReasonRequiredError, TransitionFailedError) as e:
            self.notifier.error(str(e))
            return False

        status = parse_target(target)
        self.notifier.success(f"{self.kind.label} {status.past_tense} successfully")
        await self.load()
        return True


class EntityDetailView:
    """
    One driver, vehicle or fleet partner.

    Late results are dropped once the view is closed; a failed fetch
    navigates back to the list.
    """

    def __init__(
        self,
        api: AdminAPI,
        kind: Union[EntityKind, str],
        entity_id: Union[UUID, str],
        notifier: Notifier,
        navigate_back: Callable[[], None],
        controller: Optional[StatusLifecycleController] = None,
    ) -> None:
        self.api = api
        self.kind = EntityKind(kind)
        self.entity_id = entity_id
        self.notifier = notifier
        self.navigate_back = navigate_back
        self.controller = controller or StatusLifecycleController(api, self.kind)
        self.entity: Optional[dict] = None
        self.is_active = True
        self.deletion = DeleteConfirmation(
            self._delete,
            notifier,
            label=self.kind.label,
            on_deleted=navigate_back,
        )

    async def _delete(self) -> None:
        await self.api.delete_entity(self.kind, self.entity_id)

    def close(self) -> None:
        self.is_active = False

    async def load(self) -> Optional[dict]:
        try:
            entity = await self.api.get_entity(self.kind, self.entity_id)
        except ApiError as e:
            logger.error(f"Loading {self.kind.value} {self.entity_id} failed: {e}")
            if self.is_active:
                self.notifier.error(f"Failed to load {self.kind.label.lower()} details")
                self.navigate_back()
            return None

        if not self.is_active:
            return None

        self.entity = entity
        return entity

    @property
    def current_status(self) -> ReviewStatus:
        return normalize_status((self.entity or {}).get("status"))

    @property
    def actions(self) -> dict[ReviewStatus, bool]:
        """Enabled flag of approve / reject / in review buttons."""
        return available_transitions(self.current_status)

    async def change_status(
        self,
        target: Union[ReviewStatus, str],
        reason: Optional[str] = None,
    ) -> bool:
        """Write a status change from the detail page and refetch on success."""
        try:
            status = parse_target(target)
        except InvalidStatusError as e:
            self.notifier.error(str(e))
            return False

        if not self.actions[status]:
            return False

        try:
            await self.controller.request_transition(
                self.entity_id, status, reason, TransitionOrigin.DETAIL
            )
        except TransitionFailedError as e:
            self.notifier.error(str(e))
            return False

        self.notifier.success(f"{self.kind.label} {status.past_tense} successfully")
        await self.load()
        return True


class DriverPortalView:
    """
    The logged-in driver's profile and vehicles.

    Every edit is followed by a refetch: the server sends the edited record
    back to review and the local copy would be stale.
    """

    def __init__(self, api: DriverAPI, notifier: Notifier) -> None:
        self.api = api
        self.notifier = notifier
        self.profile: Optional[dict] = None
        self.vehicles: list[dict] = []

    async def load(self) -> None:
        try:
            self.profile = await self.api.get_profile()
            self.vehicles = list(await self.api.list_vehicles())
        except ApiError as e:
            logger.error(f"Loading driver portal failed: {e}")
            self.notifier.error("Failed to load your profile")

    async def _mutate(self, call, success_message: str) -> bool:
        try:
            await call
        except ApiError as e:
            self.notifier.error(str(e.detail))
            return False

        self.notifier.success(success_message)
        await self.load()
        return True

    async def update_profile(self, **fields: Any) -> bool:
        return await self._mutate(
            self.api.update_profile(**fields),
            "Profile updated and sent for review",
        )

    async def update_profile_photo(self, profile_image: str) -> bool:
        return await self._mutate(
            self.api.update_profile_photo(profile_image),
            "Profile photo updated and sent for review",
        )

    async def upload_document(self, **document: Any) -> bool:
        return await self._mutate(
            self.api.upload_document(**document),
            "Document uploaded and sent for review",
        )

    async def update_vehicle(self, vehicle_id: Union[UUID, str], **fields: Any) -> bool:
        return await self._mutate(
            self.api.update_vehicle(vehicle_id, **fields),
            "Vehicle updated and sent for review",
        )

    async def update_vehicle_photo(self, vehicle_id: Union[UUID, str], car_image: str) -> bool:
        return await self._mutate(
            self.api.update_vehicle_photo(vehicle_id, car_image),
            "Vehicle photo updated and sent for review",
        )

    async def upload_vehicle_document(self, vehicle_id: Union[UUID, str], **document: Any) -> bool:
        return await self._mutate(
            self.api.upload_vehicle_document(vehicle_id, **document),
            "Vehicle document uploaded and sent for review",
        )
