"""Builders for the notifications a session transition produces.

Every builder is pure: it returns an unpersisted draft addressed to the
session's user and linked to the session. Persisting the draft is up to the
caller.
"""

from datetime import datetime

from therapy_scheduler.domain.actors import TherapistRecord
from therapy_scheduler.domain.notifications import NotificationDraft, NotificationType
from therapy_scheduler.domain.sessions import SessionRecord

NO_REASON = "No reason provided"


def session_cancelled(
    session: SessionRecord,
    therapist: TherapistRecord,
    reason: str,
    created_at: datetime,
) -> NotificationDraft:
    """Build the notice sent when a session is cancelled."""
    return _draft(
        session,
        NotificationType.SESSION_CANCELLED,
        title="Session Cancelled",
        message=(
            f"Your session with {_doctor(therapist)} has been cancelled. "
            f"Reason: {reason}"
        ),
        created_at=created_at,
    )


def session_rescheduled(
    session: SessionRecord,
    therapist: TherapistRecord,
    new_date_text: str,
    created_at: datetime,
) -> NotificationDraft:
    """Build the notice sent when a session moves to a new date."""
    return _draft(
        session,
        NotificationType.SESSION_RESCHEDULED,
        title="Session Rescheduled",
        message=(
            f"Your session with {_doctor(therapist)} has been rescheduled to "
            f"{new_date_text}"
        ),
        created_at=created_at,
    )


def session_completed(
    session: SessionRecord, therapist: TherapistRecord, created_at: datetime
) -> NotificationDraft:
    """Build the thank-you notice sent when a session is completed."""
    return _draft(
        session,
        NotificationType.SESSION_COMPLETED,
        title="Session Completed",
        message=(
            f"Your session with {_doctor(therapist)} has been marked as "
            "completed. Thank you for your time!"
        ),
        created_at=created_at,
    )


def format_session_date(value: datetime) -> str:
    """Render a session date the way notification messages show it."""
    return value.isoformat()


def _doctor(therapist: TherapistRecord) -> str:
    return f"Dr. {therapist.last_name}"


def _draft(
    session: SessionRecord,
    notification_type: NotificationType,
    *,
    title: str,
    message: str,
    created_at: datetime,
) -> NotificationDraft:
    return NotificationDraft(
        user_id=session.user_id,
        session_id=session.id,
        title=title,
        message=message,
        type=notification_type,
        created_at=created_at,
        read=False,
    )
