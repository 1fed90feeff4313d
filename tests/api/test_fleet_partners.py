"""Tests for fleet partner back-office endpoints."""
import pytest
from unittest.mock import AsyncMock
from uuid import uuid4

from fleetdesk.models.enums import UserRole
from tests.api.conftest import (
    make_mock_document,
    make_mock_driver,
    make_mock_fleet_company,
    make_mock_result,
    make_mock_vehicle,
)


class TestListFleetPartners:

    async def test_list_returns_200(self, client, mock_session):
        company = make_mock_fleet_company()
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalars_list=[company])
        )

        response = await client.get("/api/v1/fleet-partners")
        assert response.status_code == 200
        assert response.json()["items"][0]["company_name"] == "Metro Fleet"

    async def test_search_matches_contact_person(self, client, mock_session):
        company = make_mock_fleet_company()
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalars_list=[company])
        )

        response = await client.get("/api/v1/fleet-partners", params={"search": "sam"})
        assert response.json()["total"] == 1

    async def test_undated_documents_count_in_no_bucket(self, client, mock_session):
        company = make_mock_fleet_company(
            documents=[make_mock_document("business_license", expires_in_days=None)]
        )
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalars_list=[company])
        )

        response = await client.get("/api/v1/fleet-partners", params={"document": "valid"})
        data = response.json()
        assert data["items"] == []
        assert data["document_counts"] == {"expired": 0, "expiring": 0, "valid": 0}


class TestGetFleetPartner:

    async def test_detail_lists_live_drivers_and_vehicles(self, client, mock_session):
        company = make_mock_fleet_company()
        deleted = make_mock_driver(firstname="Gone")
        deleted.is_deleted = True
        company.drivers = [make_mock_driver(), deleted]
        company.vehicles = [make_mock_vehicle()]
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=company)
        )

        response = await client.get(f"/api/v1/fleet-partners/{company.id}")
        assert response.status_code == 200
        data = response.json()
        assert [driver["full_name"] for driver in data["drivers"]] == ["Alex Doe"]
        assert len(data["vehicles"]) == 1

    async def test_company_reads_own_record(self, client, mock_session, fleet_company_user):
        company = make_mock_fleet_company(company_id=fleet_company_user.fleet_company_id)
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=company)
        )

        response = await client.get(f"/api/v1/fleet-partners/{company.id}")
        assert response.status_code == 200

    async def test_company_cannot_read_other_company(self, client, fleet_company_user):
        response = await client.get(f"/api/v1/fleet-partners/{uuid4()}")
        assert response.status_code == 403

    async def test_not_found_returns_404(self, client, mock_session):
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=None)
        )

        response = await client.get(f"/api/v1/fleet-partners/{uuid4()}")
        assert response.status_code == 404


class TestChangeFleetPartnerStatus:

    async def test_reject_notifies_company(self, client, mock_session):
        company = make_mock_fleet_company(status="in_review")
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=company)
        )

        response = await client.put(
            f"/api/v1/fleet-partners/{company.id}/status",
            json={"status": "rejected", "status_description": "Tax id mismatch"},
        )
        assert response.status_code == 200
        assert response.json()["entity"] == "fleet_partner"

        notification = mock_session.add.call_args[0][0]
        assert notification.recipient_role == UserRole.FLEET_COMPANY
        assert notification.fleet_company_id == company.id


class TestDeleteFleetPartner:

    async def test_delete_soft_deletes(self, client, mock_session):
        company = make_mock_fleet_company()
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=company)
        )

        response = await client.delete(f"/api/v1/fleet-partners/{company.id}")
        assert response.status_code == 204
        assert company.is_deleted is True

    async def test_non_admin_cannot_delete(self, client, fleet_company_user):
        response = await client.delete(
            f"/api/v1/fleet-partners/{fleet_company_user.fleet_company_id}"
        )
        assert response.status_code == 403
