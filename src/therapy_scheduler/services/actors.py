"""Lookup of the users and therapists a session references."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from therapy_scheduler.domain.actors import TherapistRecord, UserRecord
from therapy_scheduler.domain.errors import ReferenceNotFoundError


class UserRepository(Protocol):
    """Read interface for user records."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""


class TherapistRepository(Protocol):
    """Read interface for therapist records."""

    def get_therapist(self, therapist_id: UUID) -> TherapistRecord | None:
        """Return the therapist for an id, if present."""


@dataclass
class ActorResolver:
    """Resolves actor ids, raising when a reference is dangling."""

    user_repository: UserRepository
    therapist_repository: TherapistRepository

    def require_user(self, user_id: UUID) -> UserRecord:
        """Return the user or raise ReferenceNotFoundError."""
        user = self.user_repository.get_user(user_id)
        if user is None:
            raise ReferenceNotFoundError("user", user_id)
        return user

    def require_therapist(self, therapist_id: UUID) -> TherapistRecord:
        """Return the therapist or raise ReferenceNotFoundError."""
        therapist = self.therapist_repository.get_therapist(therapist_id)
        if therapist is None:
            raise ReferenceNotFoundError("therapist", therapist_id)
        return therapist
