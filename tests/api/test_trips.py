"""Tests for trip endpoints."""
import pytest
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from fleetdesk.models.enums import TripStatus
from tests.api.conftest import make_mock_result, make_mock_trip


class TestListTrips:

    async def test_list_returns_200(self, client, mock_session):
        trip = make_mock_trip()
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalars_list=[trip])
        )

        response = await client.get("/api/v1/trips")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["trip_status"] == "completed"

    async def test_invalid_status_filter_returns_422(self, client):
        response = await client.get("/api/v1/trips", params={"trip_status": "lost"})
        assert response.status_code == 422

    async def test_driver_sees_trips(self, client, mock_session, driver_user):
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalars_list=[])
        )

        response = await client.get("/api/v1/trips")
        assert response.status_code == 200
        query = str(mock_session.execute.call_args[0][0])
        assert "trips.driver_id" in query


class TestGetTrip:

    async def test_detail_defaults(self, client, mock_session):
        trip = make_mock_trip()
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=trip)
        )

        response = await client.get(f"/api/v1/trips/{trip.id}")
        assert response.status_code == 200
        data = response.json()
        assert data["user_details"] == {}
        assert data["payment_transaction"] == {}
        assert data["stops"] == []

    async def test_stops_sorted_by_order(self, client, mock_session):
        trip = make_mock_trip()
        second, first = MagicMock(), MagicMock()
        second.stop_order, second.location = 2, "Museum"
        first.stop_order, first.location = 1, "Harbor"
        trip.stops = [second, first]
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=trip)
        )

        response = await client.get(f"/api/v1/trips/{trip.id}")
        assert [stop["location"] for stop in response.json()["stops"]] == ["Harbor", "Museum"]

    async def test_not_found_returns_404(self, client, mock_session):
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=None)
        )

        response = await client.get(f"/api/v1/trips/{uuid4()}")
        assert response.status_code == 404


class TestUpdateTripStatus:

    async def test_update_status(self, client, mock_session):
        trip = make_mock_trip(trip_status="upcoming")
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=trip)
        )

        response = await client.put(
            f"/api/v1/trips/{trip.id}/status",
            json={"trip_status": "running"},
        )
        assert response.status_code == 200
        assert response.json()["trip_status"] == "running"
        assert trip.trip_status == TripStatus.RUNNING

    async def test_fleet_company_cannot_update(self, client, fleet_company_user):
        response = await client.put(
            f"/api/v1/trips/{uuid4()}/status",
            json={"trip_status": "running"},
        )
        assert response.status_code == 403
