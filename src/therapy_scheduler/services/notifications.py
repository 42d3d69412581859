"""Notification access operations."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from therapy_scheduler.domain.errors import NotFoundError
from therapy_scheduler.domain.notifications import (
    NotificationDraft,
    NotificationRecord,
    NotificationType,
)

_logger = logging.getLogger(__name__)


class NotificationRepository(Protocol):
    """Persistence interface for notifications."""

    def create_notification(self, draft: NotificationDraft) -> NotificationRecord:
        """Persist a notification draft and return the stored record."""

    def get_notification(self, notification_id: UUID) -> NotificationRecord | None:
        """Return a notification by id, if present."""

    def list_by_user(self, user_id: UUID) -> list[NotificationRecord]:
        """Return a user's notifications, newest first."""

    def list_unread_by_user(self, user_id: UUID) -> list[NotificationRecord]:
        """Return a user's unread notifications, newest first."""

    def mark_read(self, notification_id: UUID) -> NotificationRecord | None:
        """Set the read flag and return the updated record, if present."""

    def delete_notification(self, notification_id: UUID) -> None:
        """Delete a notification."""


def utc_now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(tz=UTC)


@dataclass
class NotificationService:
    """Application service for reading and managing notifications."""

    repository: NotificationRepository
    clock: Callable[[], datetime] = utc_now

    def list_by_user(self, user_id: UUID) -> list[NotificationRecord]:
        """Return all notifications for a user, newest first."""
        return self.repository.list_by_user(user_id)

    def list_unread_by_user(self, user_id: UUID) -> list[NotificationRecord]:
        """Return unread notifications for a user, newest first."""
        return self.repository.list_unread_by_user(user_id)

    def get_notification(self, notification_id: UUID) -> NotificationRecord | None:
        """Return a notification by id, if present."""
        return self.repository.get_notification(notification_id)

    def create_notification(  # noqa: PLR0913
        self,
        user_id: UUID,
        title: str,
        message: str,
        notification_type: NotificationType,
        session_id: UUID | None = None,
    ) -> NotificationRecord:
        """Create a notification directly, outside any session transition."""
        draft = NotificationDraft(
            user_id=user_id,
            session_id=session_id,
            title=title,
            message=message,
            type=notification_type,
            created_at=self.clock(),
        )
        return self.repository.create_notification(draft)

    def mark_as_read(self, notification_id: UUID) -> NotificationRecord:
        """Mark a notification read; repeated calls are harmless."""
        current = self.repository.get_notification(notification_id)
        if current is None:
            raise NotFoundError("notification", notification_id)
        if current.read:
            return current
        updated = self.repository.mark_read(notification_id)
        if updated is None:
            raise NotFoundError("notification", notification_id)
        _logger.info("Notification marked read: id=%s", notification_id)
        return updated

    def delete_notification(self, notification_id: UUID) -> None:
        """Delete a notification; absent ids are left to the store."""
        self.repository.delete_notification(notification_id)
