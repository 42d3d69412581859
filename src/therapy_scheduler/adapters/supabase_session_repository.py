"""Supabase-backed session repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from therapy_scheduler.adapters.supabase_notification_repository import (
    notification_payload,
)
from therapy_scheduler.adapters.supabase_support import execute, first_row
from therapy_scheduler.domain.errors import NotFoundError
from therapy_scheduler.domain.notifications import NotificationDraft
from therapy_scheduler.domain.sessions import SessionRecord, SessionStatus
from therapy_scheduler.services.sessions import SessionRepository

_COLUMNS = (
    "id, user_id, therapist_id, session_date, duration, session_type, status, notes"
)
_UPDATE_WITH_NOTIFICATION_FN = "update_session_with_notification"


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for sessions."""

    client: Client

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
        """Create a session row and return it."""
        response = execute(
            self.client.table("sessions").insert(
                {
                    "user_id": str(user_id),
                    "therapist_id": str(therapist_id),
                    "session_date": session_date.isoformat(),
                    "duration": duration_minutes,
                    "session_type": session_type,
                    "status": status.value,
                    "notes": notes,
                }
            ),
            "create_session",
        )
        return parse_session(first_row(response, "create_session"))

    def get_session(self, session_id: UUID) -> SessionRecord | None:
        """Return a session by id, if present."""
        response = execute(
            self.client.table("sessions")
            .select(_COLUMNS)
            .eq("id", str(session_id))
            .limit(1),
            "get_session",
        )
        if not response.data:
            return None
        return parse_session(response.data[0])

    def list_sessions(self) -> list[SessionRecord]:
        """Return every session ordered by date."""
        response = execute(
            self.client.table("sessions")
            .select(_COLUMNS)
            .order("session_date", desc=False),
            "list_sessions",
        )
        return [parse_session(row) for row in response.data or []]

    def list_by_user(self, user_id: UUID) -> list[SessionRecord]:
        """Return the sessions booked by a user."""
        return self._list_where("list_by_user", ("user_id", str(user_id)))

    def list_by_therapist(self, therapist_id: UUID) -> list[SessionRecord]:
        """Return the sessions run by a therapist."""
        return self._list_where(
            "list_by_therapist", ("therapist_id", str(therapist_id))
        )

    def list_by_status(self, status: SessionStatus) -> list[SessionRecord]:
        """Return sessions in a status."""
        return self._list_where("list_by_status", ("status", status.value))

    def list_by_user_and_status(
        self, user_id: UUID, status: SessionStatus
    ) -> list[SessionRecord]:
        """Return a user's sessions in a status."""
        return self._list_where(
            "list_by_user_and_status",
            ("user_id", str(user_id)),
            ("status", status.value),
        )

    def list_in_date_range(
        self, start: datetime, end: datetime
    ) -> list[SessionRecord]:
        """Return sessions dated between start and end, inclusive."""
        response = execute(
            self.client.table("sessions")
            .select(_COLUMNS)
            .gte("session_date", start.isoformat())
            .lte("session_date", end.isoformat())
            .order("session_date", desc=False),
            "list_in_date_range",
        )
        return [parse_session(row) for row in response.data or []]

    def update_session(
        self,
        session: SessionRecord,
        notification: NotificationDraft | None = None,
    ) -> SessionRecord:
        """Write session fields, inserting the notification in the same transaction.

        With a notification the write goes through a Postgres function so the
        session row and the notification row commit together.
        """
        fields = _session_fields(session)
        if notification is None:
            response = execute(
                self.client.table("sessions")
                .update(fields)
                .eq("id", str(session.id)),
                "update_session",
            )
            if not response.data:
                raise NotFoundError("session", session.id)
            return parse_session(response.data[0])

        response = execute(
            self.client.rpc(
                _UPDATE_WITH_NOTIFICATION_FN,
                {
                    "p_session_id": str(session.id),
                    "p_session": fields,
                    "p_notification": notification_payload(notification),
                },
            ),
            _UPDATE_WITH_NOTIFICATION_FN,
        )
        data = response.data
        row = data[0] if isinstance(data, list) and data else data
        if not row:
            raise NotFoundError("session", session.id)
        return parse_session(row)

    def delete_session(self, session_id: UUID) -> None:
        """Delete a session row."""
        execute(
            self.client.table("sessions").delete().eq("id", str(session_id)),
            "delete_session",
        )

    def _list_where(
        self, action: str, *filters: tuple[str, str]
    ) -> list[SessionRecord]:
        query = self.client.table("sessions").select(_COLUMNS)
        for column, value in filters:
            query = query.eq(column, value)
        response = execute(query.order("session_date", desc=False), action)
        return [parse_session(row) for row in response.data or []]


def _session_fields(session: SessionRecord) -> dict[str, object]:
    return {
        "session_date": session.session_date.isoformat(),
        "duration": session.duration_minutes,
        "session_type": session.session_type,
        "status": session.status.value,
        "notes": session.notes,
        "updated_at": datetime.now(tz=UTC).isoformat(),
    }


def parse_session(row: dict[str, object]) -> SessionRecord:
    """Build a session record from a row."""
    return SessionRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        therapist_id=UUID(str(row["therapist_id"])),
        session_date=datetime.fromisoformat(str(row["session_date"])),
        duration_minutes=int(row["duration"]),
        session_type=str(row["session_type"]),
        status=SessionStatus(row["status"]),
        notes=row.get("notes"),
    )
