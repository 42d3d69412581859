"""Notification endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from therapy_scheduler.api.schemas import (
    NotificationCreateRequest,
    serialize_notification,
)

if TYPE_CHECKING:
    from therapy_scheduler.services.notifications import NotificationService

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


def _service(request: Request) -> NotificationService:
    return request.app.state.container.notification_service


@router.get("/user/{user_id}")
async def notifications_for_user(
    user_id: UUID, request: Request
) -> dict[str, object]:
    """Return a user's notifications, newest first."""
    notifications = _service(request).list_by_user(user_id)
    return {"notifications": [serialize_notification(n) for n in notifications]}


@router.get("/user/{user_id}/unread")
async def unread_notifications(user_id: UUID, request: Request) -> dict[str, object]:
    """Return a user's unread notifications, newest first."""
    notifications = _service(request).list_unread_by_user(user_id)
    return {"notifications": [serialize_notification(n) for n in notifications]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_notification(
    payload: NotificationCreateRequest, request: Request
) -> dict[str, object]:
    """Create a notification directly."""
    notification = _service(request).create_notification(
        user_id=payload.user_id,
        title=payload.title,
        message=payload.message,
        notification_type=payload.type,
        session_id=payload.session_id,
    )
    return serialize_notification(notification)


@router.get("/{notification_id}")
async def get_notification(
    notification_id: UUID, request: Request
) -> dict[str, object]:
    """Return one notification."""
    notification = _service(request).get_notification(notification_id)
    if notification is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_notification(notification)


@router.put("/{notification_id}/read")
async def mark_as_read(notification_id: UUID, request: Request) -> dict[str, object]:
    """Mark a notification as read."""
    notification = _service(request).mark_as_read(notification_id)
    return serialize_notification(notification)


@router.delete("/{notification_id}")
async def delete_notification(
    notification_id: UUID, request: Request
) -> dict[str, str]:
    """Delete a notification."""
    _service(request).delete_notification(notification_id)
    return {"status": "ok"}
