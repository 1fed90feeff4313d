"""Tests for fleetdesk.client.api -- HTTP wrapper over httpx."""
import json

import httpx
import pytest

from fleetdesk.client.api import AdminAPI, ApiClient, ApiError, AuthAPI, DriverAPI
from fleetdesk.core.session import SessionContext
from fleetdesk.models.enums import EntityKind


def make_client(handler, session=None):
    return ApiClient(
        session=session or SessionContext(),
        base_url="http://api.test/api/v1",
        transport=httpx.MockTransport(handler),
    )


class TestApiClient:

    async def test_bearer_header_and_params(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("Authorization")
            seen["url"] = str(request.url)
            return httpx.Response(200, json={"items": [], "total": 0})

        session = SessionContext()
        session.login("tok", {"role": "admin"})
        client = make_client(handler, session)

        await AdminAPI(client).list_entities(EntityKind.DRIVER, search="alex", status=None)
        assert seen["auth"] == "Bearer tok"
        assert seen["url"] == "http://api.test/api/v1/drivers?search=alex"

    async def test_error_detail(self):
        client = make_client(lambda request: httpx.Response(404, json={"detail": "Driver not found"}))

        with pytest.raises(ApiError) as exc_info:
            await client.get("/drivers/x")
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Driver not found"

    async def test_non_json_error(self):
        client = make_client(lambda request: httpx.Response(502, text="Bad gateway"))

        with pytest.raises(ApiError) as exc_info:
            await client.get("/drivers")
        assert exc_info.value.detail == "Bad gateway"

    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(ApiError) as exc_info:
            await make_client(handler).get("/drivers")
        assert exc_info.value.status_code is None

    async def test_401_logs_out(self):
        session = SessionContext()
        session.login("stale", {"role": "admin"})
        client = make_client(lambda request: httpx.Response(401, json={"detail": "expired"}), session)

        with pytest.raises(ApiError):
            await client.get("/auth/me")
        assert not session.is_authenticated

    async def test_no_content(self):
        client = make_client(lambda request: httpx.Response(204))
        assert await AdminAPI(client).delete_entity("vehicle", "v-1") is None


class TestAuthAPI:

    async def test_login_populates_session(self):
        def handler(request):
            assert request.url.path == "/api/v1/auth/token"
            assert b"username=alex%40drivers.test" in request.content
            return httpx.Response(200, json={
                "access_token": "tok",
                "token_type": "bearer",
                "user": {"email": "alex@drivers.test", "role": "driver"},
            })

        client = make_client(handler)
        user = await AuthAPI(client).login("alex@drivers.test", "secret")
        assert user["role"] == "driver"
        assert client.session.token == "tok"


class TestAdminAndDriverAPI:

    async def test_update_status_body(self):
        captured = {}

        def handler(request):
            captured["method"] = request.method
            captured["path"] = request.url.path
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"status": "rejected"})

        await AdminAPI(make_client(handler)).update_status(
            EntityKind.FLEET_PARTNER, "c-1", "rejected", "Missing permit"
        )
        assert captured == {
            "method": "PUT",
            "path": "/api/v1/fleet-partners/c-1/status",
            "body": {"status": "rejected", "status_description": "Missing permit"},
        }

    async def test_driver_vehicle_photo(self):
        captured = {}

        def handler(request):
            captured["path"] = request.url.path
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"requires_refetch": True})

        await DriverAPI(make_client(handler)).update_vehicle_photo("v-1", "https://img")
        assert captured["path"] == "/api/v1/driver/vehicles/v-1/photo"
        assert captured["body"] == {"car_image": "https://img"}

    async def test_review_queue_and_read_all_paths(self):
        calls = []

        def handler(request):
            calls.append((request.method, request.url.path))
            return httpx.Response(200, json={"total": 0, "updated": 0})

        api = AdminAPI(make_client(handler))
        await api.get_pending_approvals()
        await api.mark_all_notifications_read()
        assert calls == [
            ("GET", "/api/v1/dashboard/pending-approvals"),
            ("PUT", "/api/v1/notifications/read-all"),
        ]
