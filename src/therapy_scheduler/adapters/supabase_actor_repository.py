"""Supabase-backed lookups for users and therapists."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from therapy_scheduler.adapters.supabase_support import execute
from therapy_scheduler.domain.actors import TherapistRecord, UserRecord
from therapy_scheduler.services.actors import TherapistRepository, UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user lookups."""

    client: Client

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = execute(
            self.client.table("users")
            .select("id, first_name, last_name, email")
            .eq("id", str(user_id))
            .limit(1),
            "get_user",
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserRecord(
            id=UUID(row["id"]),
            first_name=row.get("first_name") or "",
            last_name=row.get("last_name") or "",
            email=row.get("email"),
        )


@dataclass
class SupabaseTherapistRepository(TherapistRepository):
    """Supabase implementation for therapist lookups."""

    client: Client

    def get_therapist(self, therapist_id: UUID) -> TherapistRecord | None:
        """Return the therapist for an id, if present."""
        response = execute(
            self.client.table("therapists")
            .select("id, first_name, last_name")
            .eq("id", str(therapist_id))
            .limit(1),
            "get_therapist",
        )
        if not response.data:
            return None
        row = response.data[0]
        return TherapistRecord(
            id=UUID(row["id"]),
            first_name=row.get("first_name") or "",
            last_name=row.get("last_name") or "",
        )
