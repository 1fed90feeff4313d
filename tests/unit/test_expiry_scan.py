"""Tests for the document expiry scan planning in fleetdesk.services.tasks."""
import pytest
from datetime import date, timedelta
from types import SimpleNamespace
from unittest.mock import MagicMock, patch
from uuid import uuid4

from celery.exceptions import Retry
from sqlalchemy.exc import OperationalError

from fleetdesk.models.enums import (
    DriverDocumentType,
    EntityKind,
    NotificationType,
    UserRole,
    VehicleDocumentType,
)
from fleetdesk.services.tasks import (
    _load_documents,
    plan_expiry_notifications,
    scan_document_expiry,
)

TODAY = date(2026, 5, 15)


def _driver_doc(days, document_type=DriverDocumentType.DRIVING_LICENSE):
    driver_id = uuid4()
    return SimpleNamespace(
        id=uuid4(),
        document_type=document_type,
        document_expiry_date=TODAY + timedelta(days=days) if days is not None else None,
        driver_id=driver_id,
        driver=SimpleNamespace(full_name="Alex Doe"),
    )


def _vehicle_doc(days, driver_id=None, fleet_company_id=None):
    return SimpleNamespace(
        id=uuid4(),
        document_type=VehicleDocumentType.INSURANCE,
        document_expiry_date=TODAY + timedelta(days=days),
        vehicle=SimpleNamespace(
            car_name="Sprinter",
            car_number="AB-123",
            driver_id=driver_id,
            fleet_company_id=fleet_company_id,
        ),
    )


class TestPlanExpiryNotifications:

    def test_expired_driver_document(self):
        document = _driver_doc(-3)
        planned = plan_expiry_notifications([(EntityKind.DRIVER, document)], TODAY)

        assert [item.recipient_role for item in planned] == [UserRole.ADMIN, UserRole.DRIVER]
        admin = planned[0]
        assert admin.notification_type is NotificationType.DOCUMENT_EXPIRED
        assert admin.title == "Driving License expired 3 days ago"
        assert "Driver Alex Doe" in admin.message
        assert admin.reference_key == (
            f"admin:driver:{document.id}:document_expired:{document.document_expiry_date}"
        )
        assert planned[1].driver_id == document.driver_id

    def test_expiring_today_counts_as_expiring(self):
        planned = plan_expiry_notifications([(EntityKind.DRIVER, _driver_doc(0))], TODAY)
        assert planned[0].notification_type is NotificationType.DOCUMENT_EXPIRING
        assert planned[0].title == "Driving License expires today!"

    def test_valid_and_undated_documents_skipped(self):
        planned = plan_expiry_notifications(
            [(EntityKind.DRIVER, _driver_doc(31)), (EntityKind.DRIVER, _driver_doc(None))],
            TODAY,
        )
        assert planned == []

    def test_fleet_owned_vehicle_notifies_company(self):
        company_id = uuid4()
        planned = plan_expiry_notifications(
            [(EntityKind.VEHICLE, _vehicle_doc(5, fleet_company_id=company_id))], TODAY
        )
        owner = planned[1]
        assert owner.recipient_role is UserRole.FLEET_COMPANY
        assert owner.fleet_company_id == company_id
        assert "Sprinter (AB-123)" in owner.message

    def test_unowned_vehicle_only_notifies_admin(self):
        planned = plan_expiry_notifications([(EntityKind.VEHICLE, _vehicle_doc(5))], TODAY)
        assert [item.recipient_role for item in planned] == [UserRole.ADMIN]

    def test_keys_unique_per_recipient(self):
        documents = [(EntityKind.DRIVER, _driver_doc(-1)), (EntityKind.DRIVER, _driver_doc(2))]
        planned = plan_expiry_notifications(documents, TODAY)
        keys = [item.reference_key for item in planned]
        assert len(keys) == len(set(keys)) == 4


class TestLoadDocuments:

    def test_vehicles_of_deleted_drivers_skipped(self):
        session = MagicMock()
        session.execute.return_value.scalars.return_value.all.return_value = []

        assert _load_documents(session) == []
        driver_query, vehicle_query, company_query = (
            str(call[0][0]) for call in session.execute.call_args_list
        )
        assert "drivers.is_deleted" in driver_query
        assert "LEFT OUTER JOIN drivers" in vehicle_query
        assert "drivers.is_deleted IS NOT" in vehicle_query
        assert "fleet_companies.is_deleted" in company_query


class TestScanDocumentExpiry:

    def test_lost_database_is_retried(self):
        lost = OperationalError("SELECT 1", {}, Exception("connection lost"))
        with patch("fleetdesk.services.tasks.Session") as session_cls, \
                patch("fleetdesk.services.tasks._load_documents", side_effect=lost), \
                patch.object(scan_document_expiry, "retry", side_effect=Retry()) as retry:
            with pytest.raises(Retry):
                scan_document_expiry("2026-05-15")

        retry.assert_called_once_with(exc=lost)
        session_cls.return_value.__enter__.return_value.rollback.assert_called_once()

    def test_other_errors_are_raised(self):
        with patch("fleetdesk.services.tasks.Session"), \
                patch("fleetdesk.services.tasks._load_documents", side_effect=ValueError("bad row")), \
                patch.object(scan_document_expiry, "retry") as retry:
            with pytest.raises(ValueError):
                scan_document_expiry("2026-05-15")

        retry.assert_not_called()
