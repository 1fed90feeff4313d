"""
Notification helpers shared by the API and the expiry scan.
"""
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import Select, select

from fleetdesk.models.enums import EntityKind, NotificationType, ReviewStatus, UserRole
from fleetdesk.models.notification import Notification
from fleetdesk.services.lifecycle import clean_reason


def owner_of(kind: EntityKind, entity: Any) -> tuple[Optional[UserRole], Optional[UUID], Optional[UUID]]:
    """(role, driver_id, fleet_company_id) of whoever logs in for a record."""
    if kind is EntityKind.DRIVER:
        return UserRole.DRIVER, entity.id, None
    if kind is EntityKind.FLEET_PARTNER:
        return UserRole.FLEET_COMPANY, None, entity.id
    if entity.driver_id is not None:
        return UserRole.DRIVER, entity.driver_id, None
    if entity.fleet_company_id is not None:
        return UserRole.FLEET_COMPANY, None, entity.fleet_company_id
    return None, None, None


def status_change_notification(
    kind: EntityKind,
    entity: Any,
    status: ReviewStatus,
    reason: Optional[str] = None,
) -> Optional[Notification]:
    """Notification telling the owner their record was reviewed; None if nobody owns it."""
    role, driver_id, fleet_company_id = owner_of(kind, entity)
    if role is None:
        return None

    message = f"Your {kind.label.lower()} record was {status.past_tense}."
    reason = clean_reason(reason)
    if reason:
        message = f"{message} Reason: {reason}"

    return Notification(
        recipient_role=role,
        driver_id=driver_id,
        fleet_company_id=fleet_company_id,
        notification_type=NotificationType.STATUS_CHANGED,
        title=f"{kind.label} {status.label.lower()}",
        message=message,
        is_read=False,
    )


def notifications_for(user: Any) -> Select:
    """Query of the notifications addressed to a user."""
    role = UserRole(user.role)
    query = select(Notification).where(Notification.recipient_role == role)
    if role is UserRole.DRIVER:
        query = query.where(Notification.driver_id == user.driver_id)
    elif role is UserRole.FLEET_COMPANY:
        query = query.where(Notification.fleet_company_id == user.fleet_company_id)
    return query
