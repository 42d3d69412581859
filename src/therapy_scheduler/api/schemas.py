"""Pydantic models for request payloads and response serializers."""

from uuid import UUID

from pydantic import AwareDatetime, BaseModel, Field

from therapy_scheduler.domain.notifications import NotificationRecord, NotificationType
from therapy_scheduler.domain.sessions import SessionChanges, SessionRecord, SessionStatus


class SessionCreateRequest(BaseModel):
    """Payload for booking a session."""

    user_id: UUID
    therapist_id: UUID
    session_date: AwareDatetime
    duration_minutes: int = Field(default=60, gt=0)
    session_type: str = "online"
    notes: str | None = None


class SessionUpdateRequest(BaseModel):
    """Full replacement of a session's mutable fields."""

    session_date: AwareDatetime
    status: SessionStatus
    duration_minutes: int = Field(gt=0)
    session_type: str
    notes: str | None = None

    def to_changes(self) -> SessionChanges:
        """Convert the payload into domain changes."""
        return SessionChanges(
            session_date=self.session_date,
            status=self.status,
            duration_minutes=self.duration_minutes,
            session_type=self.session_type,
            notes=self.notes,
        )


class SessionStatusRequest(BaseModel):
    """Payload for a status transition."""

    status: SessionStatus


class NotificationCreateRequest(BaseModel):
    """Payload for creating a notification outside a session transition."""

    user_id: UUID
    title: str = Field(min_length=1)
    message: str = Field(min_length=1)
    type: NotificationType
    session_id: UUID | None = None


def serialize_session(session: SessionRecord) -> dict[str, object]:
    """Render a session for API responses."""
    return {
        "id": str(session.id),
        "user_id": str(session.user_id),
        "therapist_id": str(session.therapist_id),
        "session_date": session.session_date.isoformat(),
        "duration_minutes": session.duration_minutes,
        "session_type": session.session_type,
        "status": session.status.value,
        "notes": session.notes,
    }


def serialize_notification(notification: NotificationRecord) -> dict[str, object]:
    """Render a notification for API responses."""
    return {
        "id": str(notification.id),
        "user_id": str(notification.user_id),
        "session_id": str(notification.session_id)
        if notification.session_id
        else None,
        "title": notification.title,
        "message": notification.message,
        "type": notification.type.value,
        "read": notification.read,
        "created_at": notification.created_at.isoformat(),
    }
