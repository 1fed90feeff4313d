"""
HTTP client for the back-office API.

One ApiClient carries the base URL, timeout and the bearer token of the
current session; AdminAPI and DriverAPI group the calls each role makes.
"""
from typing import Any, Optional, Union
from uuid import UUID
import logging

import httpx

from fleetdesk.core.config import get_settings
from fleetdesk.core.session import SessionContext
from fleetdesk.models.enums import EntityKind, TripStatus

logger = logging.getLogger(__name__)

EntityId = Union[UUID, str]

# Collection path per reviewable entity type
ENTITY_PATHS: dict[EntityKind, str] = {
    EntityKind.DRIVER: "/drivers",
    EntityKind.VEHICLE: "/vehicles",
    EntityKind.FLEET_PARTNER: "/fleet-partners",
}


class ApiError(Exception):
    """Non-2xx response or transport failure (status_code is None for the latter)."""

    def __init__(self, status_code: Optional[int], detail: Any) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API error {status_code}: {detail}")


class ApiClient:
    """Thin JSON client over httpx.AsyncClient."""

    def __init__(
        self,
        session: Optional[SessionContext] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self.session = session or SessionContext()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api_timeout_seconds
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.session.token:
            headers["Authorization"] = f"Bearer {self.session.token}"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        json: Optional[dict] = None,
        params: Optional[dict] = None,
        data: Optional[dict] = None,
    ) -> Any:
        """
        Issue one request and return the decoded JSON body (None for 204).

        Raises:
            ApiError: on non-2xx responses and transport errors
        """
        if params:
            params = {key: value for key, value in params.items() if value is not None}

        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            try:
                response = await client.request(
                    method,
                    path,
                    json=json,
                    params=params,
                    data=data,
                    headers=self._headers(),
                )
            except httpx.HTTPError as e:
                logger.error(f"{method} {path} failed: {e}")
                raise ApiError(None, str(e)) from e

        if response.status_code == 401 and self.session.is_authenticated:
            logger.warning("Session rejected by the API, logging out")
            self.session.logout()

        if not response.is_success:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            detail = body.get("detail", body) if isinstance(body, dict) else body
            raise ApiError(response.status_code, detail)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def get(self, path: str, params: Optional[dict] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def put(self, path: str, json: Optional[dict] = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def post(self, path: str, json: Optional[dict] = None) -> Any:
        return await self.request("POST", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)


class AuthAPI:
    """Login against the token endpoint and populate the session."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def login(self, email: str, password: str) -> dict:
        payload = await self.client.request(
            "POST",
            "/auth/token",
            data={"username": email, "password": password},
        )
        self.client.session.login(payload["access_token"], payload["user"])
        return payload["user"]

    def logout(self) -> None:
        self.client.session.logout()


class AdminAPI:
    """Calls made by the admin back office."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    # Reviewable entities
    async def list_entities(self, kind: EntityKind, **filters: Any) -> dict:
        return await self.client.get(ENTITY_PATHS[EntityKind(kind)], params=filters)

    async def get_entity(self, kind: EntityKind, entity_id: EntityId) -> dict:
        return await self.client.get(f"{ENTITY_PATHS[EntityKind(kind)]}/{entity_id}")

    async def update_status(
        self,
        kind: EntityKind,
        entity_id: EntityId,
        status: str,
        status_description: Optional[str] = None,
    ) -> dict:
        return await self.client.put(
            f"{ENTITY_PATHS[EntityKind(kind)]}/{entity_id}/status",
            json={"status": status, "status_description": status_description},
        )

    async def delete_entity(self, kind: EntityKind, entity_id: EntityId) -> None:
        await self.client.delete(f"{ENTITY_PATHS[EntityKind(kind)]}/{entity_id}")

    # Trips
    async def list_trips(self, trip_status: Optional[str] = None) -> dict:
        return await self.client.get("/trips", params={"trip_status": trip_status})

    async def get_trip(self, trip_id: EntityId) -> dict:
        return await self.client.get(f"/trips/{trip_id}")

    async def update_trip_status(self, trip_id: EntityId, trip_status: Union[TripStatus, str]) -> dict:
        return await self.client.put(
            f"/trips/{trip_id}/status",
            json={"trip_status": TripStatus(trip_status).value},
        )

    # Dashboard, payouts, notifications
    async def get_dashboard_stats(self) -> dict:
        return await self.client.get("/dashboard/stats")

    async def get_pending_approvals(self) -> dict:
        return await self.client.get("/dashboard/pending-approvals")

    async def get_payout_summary(self) -> dict:
        return await self.client.get("/payouts")

    async def list_notifications(self, unread_only: bool = False) -> dict:
        return await self.client.get("/notifications", params={"unread_only": unread_only})

    async def mark_notification_read(self, notification_id: EntityId) -> dict:
        return await self.client.put(f"/notifications/{notification_id}/read")

    async def mark_all_notifications_read(self) -> dict:
        return await self.client.put("/notifications/read-all")

    async def delete_notification(self, notification_id: EntityId) -> None:
        await self.client.delete(f"/notifications/{notification_id}")


class DriverAPI:
    """
    Calls made by the driver portal.

    Every mutation here sends the record back to review on the server, so
    callers refetch afterwards.
    """

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def get_profile(self) -> dict:
        return await self.client.get("/driver/profile")

    async def update_profile(self, **fields: Any) -> dict:
        return await self.client.put("/driver/profile", json=fields)

    async def update_profile_photo(self, profile_image: str) -> dict:
        return await self.client.put("/driver/profile/photo", json={"profile_image": profile_image})

    async def upload_document(self, **document: Any) -> dict:
        return await self.client.post("/driver/documents", json=document)

    async def list_vehicles(self) -> list:
        return await self.client.get("/driver/vehicles")

    async def update_vehicle(self, vehicle_id: EntityId, **fields: Any) -> dict:
        return await self.client.put(f"/driver/vehicles/{vehicle_id}", json=fields)

    async def update_vehicle_photo(self, vehicle_id: EntityId, car_image: str) -> dict:
        return await self.client.put(
            f"/driver/vehicles/{vehicle_id}/photo", json={"car_image": car_image}
        )

    async def upload_vehicle_document(self, vehicle_id: EntityId, **document: Any) -> dict:
        return await self.client.post(f"/driver/vehicles/{vehicle_id}/documents", json=document)

    async def list_trips(self) -> dict:
        return await self.client.get("/trips")

    async def update_trip_status(self, trip_id: EntityId, trip_status: Union[TripStatus, str]) -> dict:
        return await self.client.put(
            f"/trips/{trip_id}/status",
            json={"trip_status": TripStatus(trip_status).value},
        )
