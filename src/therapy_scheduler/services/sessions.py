"""Session lifecycle: creation, edits, status transitions and their notices."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Protocol
from uuid import UUID

from therapy_scheduler.domain.errors import NotFoundError
from therapy_scheduler.domain.notifications import NotificationDraft
from therapy_scheduler.domain.sessions import (
    SessionChanges,
    SessionRecord,
    SessionStatus,
    as_utc,
)
from therapy_scheduler.services import emitter
from therapy_scheduler.services.actors import ActorResolver
from therapy_scheduler.services.notifications import utc_now

_logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Persistence interface for sessions."""

    def create_session(  # noqa: PLR0913
        self,
        user_id: UUID,
        therapist_id: UUID,
        session_date: datetime,
        duration_minutes: int,
        session_type: str,
        status: SessionStatus,
        notes: str | None,
    ) -> SessionRecord:
        """Create a new session and return it."""

    def get_session(self, session_id: UUID) -> SessionRecord | None:
        """Return a session by id, if present."""

    def list_sessions(self) -> list[SessionRecord]:
        """Return every session."""

    def list_by_user(self, user_id: UUID) -> list[SessionRecord]:
        """Return the sessions booked by a user."""

    def list_by_therapist(self, therapist_id: UUID) -> list[SessionRecord]:
        """Return the sessions run by a therapist."""

    def list_by_status(self, status: SessionStatus) -> list[SessionRecord]:
        """Return the sessions currently in a status."""

    def list_by_user_and_status(
        self, user_id: UUID, status: SessionStatus
    ) -> list[SessionRecord]:
        """Return a user's sessions currently in a status."""

    def list_in_date_range(
        self, start: datetime, end: datetime
    ) -> list[SessionRecord]:
        """Return sessions dated between start and end, both inclusive."""

    def update_session(
        self,
        session: SessionRecord,
        notification: NotificationDraft | None = None,
    ) -> SessionRecord:
        """Write session fields and insert the notification in one transaction.

        Raises NotFoundError when the session no longer exists.
        """

    def delete_session(self, session_id: UUID) -> None:
        """Delete a session."""


@dataclass
class SessionService:
    """Owns the session state machine and decides which notice it emits.

    Edits and status transitions are separate entry points: a date change in
    ``update_session`` yields a reschedule notice, while cancellation and
    completion notices come only from ``update_session_status``. Statuses are
    compared by equality alone, so any status may follow any other.
    """

    session_repository: SessionRepository
    actors: ActorResolver
    clock: Callable[[], datetime] = utc_now

    def create_session(  # noqa: PLR0913
        self,
        user_id: UUID,
        therapist_id: UUID,
        session_date: datetime,
        duration_minutes: int,
        session_type: str,
        notes: str | None = None,
    ) -> SessionRecord:
        """Book a new session once both actors resolve."""
        self.actors.require_user(user_id)
        self.actors.require_therapist(therapist_id)
        session = self.session_repository.create_session(
            user_id=user_id,
            therapist_id=therapist_id,
            session_date=as_utc(session_date),
            duration_minutes=duration_minutes,
            session_type=session_type,
            status=SessionStatus.SCHEDULED,
            notes=notes,
        )
        _logger.info(
            "Session created: id=%s user_id=%s therapist_id=%s",
            session.id,
            user_id,
            therapist_id,
        )
        return session

    def update_session(
        self, session_id: UUID, changes: SessionChanges
    ) -> SessionRecord:
        """Overwrite the mutable fields, notifying the user on a date change."""
        current = self._require_session(session_id)
        new_date = as_utc(changes.session_date)
        updated = replace(
            current,
            session_date=new_date,
            status=changes.status,
            notes=changes.notes,
            session_type=changes.session_type,
            duration_minutes=changes.duration_minutes,
        )
        notification = None
        if as_utc(current.session_date) != new_date:
            therapist = self.actors.require_therapist(updated.therapist_id)
            notification = emitter.session_rescheduled(
                updated,
                therapist,
                emitter.format_session_date(new_date),
                self.clock(),
            )
        saved = self.session_repository.update_session(updated, notification)
        if notification is not None:
            _logger.info(
                "Session rescheduled: id=%s from=%s to=%s",
                session_id,
                current.session_date.isoformat(),
                new_date.isoformat(),
            )
        return saved

    def update_session_status(
        self, session_id: UUID, status: SessionStatus
    ) -> SessionRecord:
        """Move a session to a status and emit the matching notice, if any."""
        current = self._require_session(session_id)
        old_status = current.status
        updated = replace(current, status=status)
        notification = self._status_notification(updated, old_status)
        saved = self.session_repository.update_session(updated, notification)
        _logger.info(
            "Session status changed: id=%s %s -> %s notified=%s",
            session_id,
            old_status,
            status,
            notification.type if notification else None,
        )
        return saved

    def delete_session(self, session_id: UUID) -> None:
        """Remove a session without touching the state machine."""
        self.session_repository.delete_session(session_id)

    def get_session(self, session_id: UUID) -> SessionRecord | None:
        """Return a session by id, if present."""
        return self.session_repository.get_session(session_id)

    def list_sessions(self) -> list[SessionRecord]:
        """Return every session."""
        return self.session_repository.list_sessions()

    def list_by_user(self, user_id: UUID) -> list[SessionRecord]:
        """Return a user's sessions."""
        return self.session_repository.list_by_user(user_id)

    def list_by_therapist(self, therapist_id: UUID) -> list[SessionRecord]:
        """Return a therapist's sessions."""
        return self.session_repository.list_by_therapist(therapist_id)

    def list_by_status(self, status: SessionStatus) -> list[SessionRecord]:
        """Return sessions in a status."""
        return self.session_repository.list_by_status(status)

    def list_upcoming(self, user_id: UUID) -> list[SessionRecord]:
        """Return a user's sessions that are still scheduled."""
        return self.session_repository.list_by_user_and_status(
            user_id, SessionStatus.SCHEDULED
        )

    def list_in_range(self, start: datetime, end: datetime) -> list[SessionRecord]:
        """Return sessions dated within [start, end]."""
        return self.session_repository.list_in_date_range(
            as_utc(start), as_utc(end)
        )

    def _require_session(self, session_id: UUID) -> SessionRecord:
        session = self.session_repository.get_session(session_id)
        if session is None:
            raise NotFoundError("session", session_id)
        return session

    def _status_notification(
        self, session: SessionRecord, old_status: SessionStatus
    ) -> NotificationDraft | None:
        if session.status == SessionStatus.CANCELLED and (
            old_status != SessionStatus.CANCELLED
        ):
            therapist = self.actors.require_therapist(session.therapist_id)
            reason = session.notes or emitter.NO_REASON
            return emitter.session_cancelled(session, therapist, reason, self.clock())
        if session.status == SessionStatus.COMPLETED and (
            old_status != SessionStatus.COMPLETED
        ):
            therapist = self.actors.require_therapist(session.therapist_id)
            return emitter.session_completed(session, therapist, self.clock())
        return None
