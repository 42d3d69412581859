"""Read-only views of the actors a session references."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """A client who books sessions."""

    id: UUID
    first_name: str
    last_name: str
    email: str | None = None


@dataclass(frozen=True)
class TherapistRecord:
    """A therapist who runs sessions."""

    id: UUID
    first_name: str
    last_name: str
