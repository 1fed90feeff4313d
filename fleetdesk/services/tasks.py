"""
Celery tasks for FleetDesk.

Contains the daily document expiry scan that raises notifications for
expired and expiring documents.
"""
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional
from uuid import UUID
import logging

from sqlalchemy import create_engine, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from fleetdesk.core.config import settings
from fleetdesk.core.celery_app import celery_app
from fleetdesk.models.enums import EntityKind, ExpiryClass, NotificationType, UserRole
from fleetdesk.services.expiry import evaluate_expiry, expiry_label, to_date

logger = logging.getLogger(__name__)

# Create sync engine for Celery workers (they can't use async)
sync_engine = create_engine(
    settings.database_url_sync,
    pool_size=5,
    max_overflow=10,
)


@dataclass(frozen=True)
class PlannedNotification:
    """Notification the scan wants to exist, keyed for deduplication."""
    reference_key: str
    recipient_role: UserRole
    notification_type: NotificationType
    title: str
    message: str
    driver_id: Optional[UUID] = None
    fleet_company_id: Optional[UUID] = None


def _document_owner(kind: EntityKind, document: Any) -> tuple[str, Optional[UUID], Optional[UUID]]:
    """(display name, driver_id, fleet_company_id) of a document's owner."""
    if kind is EntityKind.DRIVER:
        return document.driver.full_name, document.driver_id, None
    if kind is EntityKind.FLEET_PARTNER:
        return document.fleet_company.company_name, None, document.fleet_company_id
    vehicle = document.vehicle
    return (
        f"{vehicle.car_name} ({vehicle.car_number})",
        vehicle.driver_id,
        vehicle.fleet_company_id if vehicle.driver_id is None else None,
    )


def plan_expiry_notifications(
    documents: Iterable[tuple[EntityKind, Any]],
    today: Optional[date] = None,
) -> list[PlannedNotification]:
    """
    Notifications for every expired or expiring document.

    Each document yields one admin notification and, when the owner can log
    in, one addressed to the owner. Keys include the expiry date so a renewed
    document that lapses again is notified again.
    """
    reference = to_date(today) or date.today()
    planned: list[PlannedNotification] = []

    for kind, document in documents:
        expiry = evaluate_expiry(document.document_expiry_date, reference)
        if expiry.status is ExpiryClass.EXPIRED:
            notification_type = NotificationType.DOCUMENT_EXPIRED
        elif expiry.status.needs_attention:
            notification_type = NotificationType.DOCUMENT_EXPIRING
        else:
            continue

        owner_name, driver_id, fleet_company_id = _document_owner(kind, document)
        document_type = getattr(document.document_type, "value", document.document_type)
        document_name = document_type.replace("_", " ").title()
        title = f"{document_name} {expiry_label(expiry).lower()}"
        message = f"{kind.label} {owner_name}: {document_name} {expiry_label(expiry).lower()}."
        base_key = f"{kind.value}:{document.id}:{notification_type.value}:{to_date(document.document_expiry_date)}"

        planned.append(PlannedNotification(
            reference_key=f"{UserRole.ADMIN.value}:{base_key}",
            recipient_role=UserRole.ADMIN,
            notification_type=notification_type,
            title=title,
            message=message,
            driver_id=driver_id,
            fleet_company_id=fleet_company_id,
        ))

        owner_role = None
        if driver_id is not None:
            owner_role = UserRole.DRIVER
        elif fleet_company_id is not None:
            owner_role = UserRole.FLEET_COMPANY
        if owner_role is not None:
            planned.append(PlannedNotification(
                reference_key=f"{owner_role.value}:{base_key}",
                recipient_role=owner_role,
                notification_type=notification_type,
                title=title,
                message=message,
                driver_id=driver_id,
                fleet_company_id=fleet_company_id,
            ))

    return planned


def _load_documents(session: Session) -> list[tuple[EntityKind, Any]]:
    """All documents of live owners, tagged with the owner kind."""
    from fleetdesk.models import (
        Driver,
        DriverDocument,
        FleetCompany,
        FleetCompanyDocument,
        Vehicle,
        VehicleDocument,
    )
    from fleetdesk.services.queries import with_live_driver

    driver_docs = session.execute(
        select(DriverDocument)
        .join(Driver, DriverDocument.driver_id == Driver.id)
        .where(Driver.is_deleted == False)
    ).scalars().all()

    vehicle_docs = session.execute(
        with_live_driver(
            select(VehicleDocument).join(Vehicle, VehicleDocument.vehicle_id == Vehicle.id)
        )
    ).scalars().all()

    company_docs = session.execute(
        select(FleetCompanyDocument)
        .join(FleetCompany, FleetCompanyDocument.fleet_company_id == FleetCompany.id)
        .where(FleetCompany.is_deleted == False)
    ).scalars().all()

    return (
        [(EntityKind.DRIVER, doc) for doc in driver_docs]
        + [(EntityKind.VEHICLE, doc) for doc in vehicle_docs]
        + [(EntityKind.FLEET_PARTNER, doc) for doc in company_docs]
    )


def _existing_keys(session: Session, keys: list[str]) -> set[str]:
    from fleetdesk.models import Notification

    if not keys:
        return set()
    result = session.execute(
        select(Notification.reference_key).where(Notification.reference_key.in_(keys))
    )
    return set(result.scalars().all())


@celery_app.task(
    bind=True,
    name="fleetdesk.services.tasks.scan_document_expiry",
    max_retries=2,
)
def scan_document_expiry(self, today_str: Optional[str] = None) -> dict:
    """
    Scan every document and store notifications for expired/expiring ones.

    Args:
        today_str: Optional reference date (YYYY-MM-DD), defaults to today

    Returns:
        Summary dict with scanned, planned and created counts
    """
    from fleetdesk.models import Notification

    today = to_date(today_str) or date.today()
    logger.info(f"Starting document expiry scan for {today}")

    with Session(sync_engine) as session:
        try:
            documents = _load_documents(session)
            planned = plan_expiry_notifications(documents, today)
            existing = _existing_keys(session, [item.reference_key for item in planned])

            created = 0
            for item in planned:
                if item.reference_key in existing:
                    continue
                session.add(Notification(
                    recipient_role=item.recipient_role,
                    driver_id=item.driver_id,
                    fleet_company_id=item.fleet_company_id,
                    notification_type=item.notification_type,
                    title=item.title,
                    message=item.message,
                    reference_key=item.reference_key,
                    is_read=False,
                ))
                existing.add(item.reference_key)
                created += 1

            session.commit()

            summary = {
                "scanned": len(documents),
                "planned": len(planned),
                "created": created,
            }
            logger.info(f"Document expiry scan completed: {summary}")
            return summary

        except OperationalError as e:
            session.rollback()
            logger.warning(f"Document expiry scan lost the database, retrying: {e}")
            raise self.retry(exc=e)

        except Exception as e:
            session.rollback()
            logger.error(f"Document expiry scan failed: {e}")
            raise
