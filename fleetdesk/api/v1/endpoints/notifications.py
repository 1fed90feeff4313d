"""
Notification API endpoints.
"""
from typing import Annotated
from uuid import UUID
import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from fleetdesk.core.dependencies import get_current_user
from fleetdesk.db.database import get_async_session
from fleetdesk.models import Notification, User
from fleetdesk.schemas.notification import (
    NotificationListResponse,
    NotificationReadAllResponse,
    NotificationResponse,
)
from fleetdesk.services.notifications import notifications_for

router = APIRouter()
logger = logging.getLogger(__name__)


async def _get_notification(session: AsyncSession, notification_id: UUID, user: User) -> Notification:
    result = await session.execute(
        notifications_for(user).where(Notification.id == notification_id)
    )
    notification = result.scalar_one_or_none()

    if not notification:
        raise HTTPException(status_code=404, detail="Notification not found")

    return notification


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    current_user: Annotated[User, Depends(get_current_user)],
    unread_only: bool = False,
    session: AsyncSession = Depends(get_async_session),
):
    """List the current user's notifications, newest first."""
    query = notifications_for(current_user)
    if unread_only:
        query = query.where(Notification.is_read == False)

    result = await session.execute(query.order_by(Notification.created_at.desc()))
    items = [NotificationResponse.model_validate(n) for n in result.scalars().all()]

    return NotificationListResponse(
        items=items,
        total=len(items),
        unread=sum(1 for item in items if not item.is_read),
    )


@router.put("/read-all", response_model=NotificationReadAllResponse)
async def mark_all_notifications_read(
    current_user: Annotated[User, Depends(get_current_user)],
    session: AsyncSession = Depends(get_async_session),
):
    """Mark every unread notification of the current user as read."""
    result = await session.execute(
        update(Notification)
        .where(
            notifications_for(current_user).whereclause,
            Notification.is_read == False,
        )
        .values(is_read=True)
    )
    await session.flush()

    logger.info(f"{result.rowcount} notifications marked read for {current_user.email}")
    return NotificationReadAllResponse(updated=result.rowcount)


@router.put("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    session: AsyncSession = Depends(get_async_session),
):
    """Mark one notification as read."""
    notification = await _get_notification(session, notification_id, current_user)
    notification.is_read = True
    await session.flush()
    return NotificationResponse.model_validate(notification)


@router.delete("/{notification_id}", status_code=204)
async def delete_notification(
    notification_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    session: AsyncSession = Depends(get_async_session),
):
    """Delete one notification."""
    notification = await _get_notification(session, notification_id, current_user)
    await session.delete(notification)
    await session.flush()
    return Response(status_code=204)
