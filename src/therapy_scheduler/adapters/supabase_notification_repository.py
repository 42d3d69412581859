"""Supabase-backed notification repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from therapy_scheduler.adapters.supabase_support import execute, first_row
from therapy_scheduler.domain.notifications import (
    NotificationDraft,
    NotificationRecord,
    NotificationType,
)
from therapy_scheduler.services.notifications import NotificationRepository

_COLUMNS = "id, user_id, session_id, title, message, type, read, created_at"


@dataclass
class SupabaseNotificationRepository(NotificationRepository):
    """Supabase implementation for notifications."""

    client: Client

    def create_notification(self, draft: NotificationDraft) -> NotificationRecord:
        """Insert a notification row and return it."""
        response = execute(
            self.client.table("notifications").insert(notification_payload(draft)),
            "create_notification",
        )
        return parse_notification(first_row(response, "create_notification"))

    def get_notification(self, notification_id: UUID) -> NotificationRecord | None:
        """Return a notification by id, if present."""
        response = execute(
            self.client.table("notifications")
            .select(_COLUMNS)
            .eq("id", str(notification_id))
            .limit(1),
            "get_notification",
        )
        if not response.data:
            return None
        return parse_notification(response.data[0])

    def list_by_user(self, user_id: UUID) -> list[NotificationRecord]:
        """Return a user's notifications, newest first."""
        response = execute(
            self.client.table("notifications")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True),
            "list_notifications",
        )
        return [parse_notification(row) for row in response.data or []]

    def list_unread_by_user(self, user_id: UUID) -> list[NotificationRecord]:
        """Return a user's unread notifications, newest first."""
        response = execute(
            self.client.table("notifications")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("read", False)
            .order("created_at", desc=True),
            "list_unread_notifications",
        )
        return [parse_notification(row) for row in response.data or []]

    def mark_read(self, notification_id: UUID) -> NotificationRecord | None:
        """Set the read flag on a notification."""
        response = execute(
            self.client.table("notifications")
            .update({"read": True})
            .eq("id", str(notification_id)),
            "mark_read",
        )
        if not response.data:
            return None
        return parse_notification(response.data[0])

    def delete_notification(self, notification_id: UUID) -> None:
        """Delete a notification row."""
        execute(
            self.client.table("notifications").delete().eq("id", str(notification_id)),
            "delete_notification",
        )


def notification_payload(draft: NotificationDraft) -> dict[str, object]:
    """Serialize a draft into a notifications row."""
    return {
        "user_id": str(draft.user_id),
        "session_id": str(draft.session_id) if draft.session_id else None,
        "title": draft.title,
        "message": draft.message,
        "type": draft.type.value,
        "read": draft.read,
        "created_at": draft.created_at.isoformat(),
    }


def parse_notification(row: dict[str, object]) -> NotificationRecord:
    """Build a notification record from a row."""
    return NotificationRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        session_id=UUID(str(row["session_id"])) if row.get("session_id") else None,
        title=str(row["title"]),
        message=str(row["message"]),
        type=NotificationType(row["type"]),
        read=bool(row.get("read", False)),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
