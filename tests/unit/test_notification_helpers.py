"""Tests for fleetdesk.services.notifications."""
import pytest
from types import SimpleNamespace
from uuid import uuid4

from fleetdesk.models.enums import EntityKind, NotificationType, ReviewStatus, UserRole
from fleetdesk.services.notifications import (
    notifications_for,
    owner_of,
    status_change_notification,
)


class TestOwnerOf:

    def test_driver_owns_itself(self):
        driver = SimpleNamespace(id=uuid4())
        assert owner_of(EntityKind.DRIVER, driver) == (UserRole.DRIVER, driver.id, None)

    def test_vehicle_prefers_driver(self):
        vehicle = SimpleNamespace(id=uuid4(), driver_id=uuid4(), fleet_company_id=uuid4())
        assert owner_of(EntityKind.VEHICLE, vehicle) == (UserRole.DRIVER, vehicle.driver_id, None)

    def test_unowned_vehicle(self):
        vehicle = SimpleNamespace(id=uuid4(), driver_id=None, fleet_company_id=None)
        assert owner_of(EntityKind.VEHICLE, vehicle) == (None, None, None)


class TestStatusChangeNotification:

    def test_message_with_reason(self):
        company = SimpleNamespace(id=uuid4())
        notification = status_change_notification(
            EntityKind.FLEET_PARTNER, company, ReviewStatus.REJECTED, "  Missing permit "
        )
        assert notification.notification_type == NotificationType.STATUS_CHANGED
        assert notification.fleet_company_id == company.id
        assert notification.title == "Fleet partner rejected"
        assert notification.message == (
            "Your fleet partner record was rejected. Reason: Missing permit"
        )

    def test_blank_reason_omitted(self):
        driver = SimpleNamespace(id=uuid4())
        notification = status_change_notification(
            EntityKind.DRIVER, driver, ReviewStatus.APPROVED, "   "
        )
        assert notification.message == "Your driver record was approved."


class TestNotificationsFor:

    def test_admin_scope(self):
        where = str(notifications_for(SimpleNamespace(role=UserRole.ADMIN)).whereclause)
        assert "notifications.recipient_role" in where
        assert "driver_id" not in where
        assert "fleet_company_id" not in where

    def test_driver_scope(self):
        user = SimpleNamespace(role="driver", driver_id=uuid4())
        where = str(notifications_for(user).whereclause)
        assert "notifications.driver_id" in where
        assert "fleet_company_id" not in where

    def test_company_scope(self):
        user = SimpleNamespace(role="fleet_company", fleet_company_id=uuid4())
        where = str(notifications_for(user).whereclause)
        assert "notifications.fleet_company_id" in where
        assert "driver_id" not in where
