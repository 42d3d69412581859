"""Domain models for therapy sessions."""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from uuid import UUID


class SessionStatus(StrEnum):
    """Lifecycle states of a session."""

    SCHEDULED = "SCHEDULED"
    RESCHEDULED = "RESCHEDULED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True)
class SessionRecord:
    """Represents a persisted session between one user and one therapist."""

    id: UUID
    user_id: UUID
    therapist_id: UUID
    session_date: datetime
    duration_minutes: int
    session_type: str
    status: SessionStatus
    notes: str | None = None


@dataclass(frozen=True)
class SessionChanges:
    """Replacement values for every mutable session field."""

    session_date: datetime
    status: SessionStatus
    duration_minutes: int
    session_type: str
    notes: str | None = None


def as_utc(value: datetime) -> datetime:
    """Return the instant in UTC; naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
