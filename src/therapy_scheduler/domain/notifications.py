"""Domain models for notifications."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class NotificationType(StrEnum):
    """Event category a notification reports on."""

    SESSION_CANCELLED = "SESSION_CANCELLED"
    SESSION_RESCHEDULED = "SESSION_RESCHEDULED"
    SESSION_COMPLETED = "SESSION_COMPLETED"
    SESSION_REMINDER = "SESSION_REMINDER"


@dataclass(frozen=True)
class NotificationDraft:
    """A notification built but not yet persisted."""

    user_id: UUID
    title: str
    message: str
    type: NotificationType
    created_at: datetime
    session_id: UUID | None = None
    read: bool = False


@dataclass(frozen=True)
class NotificationRecord:
    """Represents a persisted notification."""

    id: UUID
    user_id: UUID
    session_id: UUID | None
    title: str
    message: str
    type: NotificationType
    read: bool
    created_at: datetime
