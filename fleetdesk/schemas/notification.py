"""Notification schemas."""
from typing import Optional
from uuid import UUID

from fleetdesk.models.enums import NotificationType, UserRole
from fleetdesk.schemas.base import BaseSchema, IDSchema, TimestampSchema


class NotificationResponse(IDSchema, TimestampSchema):
    """Notification as listed to its recipient."""
    recipient_role: UserRole
    driver_id: Optional[UUID] = None
    fleet_company_id: Optional[UUID] = None
    notification_type: NotificationType
    title: str
    message: str
    is_read: bool = False


class NotificationListResponse(BaseSchema):
    """Notification list with unread counter."""
    items: list[NotificationResponse]
    total: int
    unread: int


class NotificationReadAllResponse(BaseSchema):
    """Result of marking every notification of the caller as read."""
    updated: int
