"""Tests for driver self-service endpoints."""
import pytest
from unittest.mock import AsyncMock
from uuid import uuid4

from fleetdesk.models import DriverDocument, VehicleDocument
from fleetdesk.models.enums import DriverDocumentType, ReviewStatus
from tests.api.conftest import (
    make_mock_document,
    make_mock_driver,
    make_mock_result,
    make_mock_vehicle,
)


class TestProfile:

    async def test_get_profile(self, client, mock_session, driver_user):
        driver = make_mock_driver(driver_id=driver_user.driver_id)
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=driver)
        )

        response = await client.get("/api/v1/driver/profile")
        assert response.status_code == 200
        assert response.json()["id"] == str(driver.id)

    async def test_unlinked_account_returns_403(self, client, driver_user):
        driver_user.driver_id = None

        response = await client.get("/api/v1/driver/profile")
        assert response.status_code == 403

    async def test_update_profile_forces_review(self, client, mock_session, driver_user):
        driver = make_mock_driver(driver_id=driver_user.driver_id, status="approved")
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=driver)
        )

        response = await client.put(
            "/api/v1/driver/profile",
            json={"city_name": "Capital City"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "in_review"
        assert data["requires_refetch"] is True
        assert driver.city_name == "Capital City"
        assert driver.status == ReviewStatus.IN_REVIEW
        mock_session.flush.assert_awaited()

    async def test_rejected_driver_also_goes_back_to_review(self, client, mock_session, driver_user):
        driver = make_mock_driver(driver_id=driver_user.driver_id, status="rejected")
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=driver)
        )

        await client.put("/api/v1/driver/profile", json={"phone_no": "+15550111"})
        assert driver.status == ReviewStatus.IN_REVIEW

    async def test_email_clash_returns_400(self, client, mock_session, driver_user):
        driver = make_mock_driver(driver_id=driver_user.driver_id, status="approved")
        other = make_mock_driver(email="taken@drivers.test")
        mock_session.execute = AsyncMock(side_effect=[
            make_mock_result(scalar_value=driver),
            make_mock_result(scalar_value=other),
        ])

        response = await client.put(
            "/api/v1/driver/profile",
            json={"email": "taken@drivers.test"},
        )
        assert response.status_code == 400
        assert driver.status == ReviewStatus.APPROVED

    async def test_update_photo_forces_review(self, client, mock_session, driver_user):
        driver = make_mock_driver(driver_id=driver_user.driver_id, status="approved")
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=driver)
        )

        response = await client.put(
            "/api/v1/driver/profile/photo",
            json={"profile_image": "https://files.test/me.jpg"},
        )
        assert response.status_code == 200
        assert driver.profile_image == "https://files.test/me.jpg"
        assert driver.status == ReviewStatus.IN_REVIEW


class TestDriverDocuments:

    async def test_new_document_is_created(self, client, mock_session, driver_user):
        driver = make_mock_driver(driver_id=driver_user.driver_id, status="approved")
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=driver)
        )

        response = await client.post(
            "/api/v1/driver/documents",
            json={
                "document_type": "driving_license",
                "document_number": " DL-42 ",
                "document_expiry_date": "2027-01-31",
                "document_url": "https://files.test/dl.pdf",
            },
        )
        assert response.status_code == 200
        document = mock_session.add.call_args[0][0]
        assert isinstance(document, DriverDocument)
        assert document.document_type == DriverDocumentType.DRIVING_LICENSE
        assert document.document_number == "DL-42"
        assert driver.status == ReviewStatus.IN_REVIEW

    async def test_existing_document_is_replaced(self, client, mock_session, driver_user):
        existing = make_mock_document("driving_license", expires_in_days=-10)
        driver = make_mock_driver(driver_id=driver_user.driver_id, documents=[existing])
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=driver)
        )

        response = await client.post(
            "/api/v1/driver/documents",
            json={
                "document_type": "driving_license",
                "document_expiry_date": "2030-06-30",
                "document_url": "https://files.test/dl-new.pdf",
            },
        )
        assert response.status_code == 200
        assert mock_session.add.call_args[0][0] is existing
        assert existing.document_url == "https://files.test/dl-new.pdf"

    async def test_unknown_document_type_returns_422(self, client, driver_user):
        response = await client.post(
            "/api/v1/driver/documents",
            json={"document_type": "insurance", "document_url": "https://files.test/x.pdf"},
        )
        assert response.status_code == 422


class TestOwnVehicles:

    async def test_list_own_vehicles(self, client, mock_session, driver_user):
        vehicle = make_mock_vehicle(driver_id=driver_user.driver_id)
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalars_list=[vehicle])
        )

        response = await client.get("/api/v1/driver/vehicles")
        assert response.status_code == 200
        assert len(response.json()) == 1

    async def test_update_features_forces_review(self, client, mock_session, driver_user):
        vehicle = make_mock_vehicle(driver_id=driver_user.driver_id, status="approved")
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=vehicle)
        )

        response = await client.put(
            f"/api/v1/driver/vehicles/{vehicle.id}",
            json={"features": ["wifi", " usb_charging ", "wifi", ""]},
        )
        assert response.status_code == 200
        assert response.json()["entity"] == "vehicle"
        assert vehicle.features == ["wifi", "usb_charging"]
        assert vehicle.status == ReviewStatus.IN_REVIEW

    async def test_update_photo_forces_review(self, client, mock_session, driver_user):
        vehicle = make_mock_vehicle(driver_id=driver_user.driver_id, status="approved")
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=vehicle)
        )

        response = await client.put(
            f"/api/v1/driver/vehicles/{vehicle.id}/photo",
            json={"car_image": "https://files.test/van.jpg"},
        )
        assert response.status_code == 200
        assert vehicle.status == ReviewStatus.IN_REVIEW

    async def test_vehicle_document_upload(self, client, mock_session, driver_user):
        vehicle = make_mock_vehicle(driver_id=driver_user.driver_id, status="approved")
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=vehicle)
        )

        response = await client.post(
            f"/api/v1/driver/vehicles/{vehicle.id}/documents",
            json={"document_type": "insurance", "document_url": "https://files.test/ins.pdf"},
        )
        assert response.status_code == 200
        assert isinstance(mock_session.add.call_args[0][0], VehicleDocument)
        assert vehicle.status == ReviewStatus.IN_REVIEW

    async def test_someone_elses_vehicle_returns_404(self, client, mock_session, driver_user):
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=None)
        )

        response = await client.put(
            f"/api/v1/driver/vehicles/{uuid4()}",
            json={"car_name": "Stolen"},
        )
        assert response.status_code == 404
