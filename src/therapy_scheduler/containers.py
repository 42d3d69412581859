"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from therapy_scheduler.adapters.supabase_actor_repository import (
    SupabaseTherapistRepository,
    SupabaseUserRepository,
)
from therapy_scheduler.adapters.supabase_notification_repository import (
    SupabaseNotificationRepository,
)
from therapy_scheduler.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from therapy_scheduler.config import Settings
from therapy_scheduler.services.actors import ActorResolver
from therapy_scheduler.services.notifications import NotificationService
from therapy_scheduler.services.sessions import SessionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_service: SessionService
    notification_service: NotificationService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    actors = ActorResolver(
        user_repository=SupabaseUserRepository(supabase_client),
        therapist_repository=SupabaseTherapistRepository(supabase_client),
    )
    session_service = SessionService(
        session_repository=SupabaseSessionRepository(supabase_client),
        actors=actors,
    )
    notification_service = NotificationService(
        SupabaseNotificationRepository(supabase_client)
    )
    return AppContainer(
        settings=resolved_settings,
        session_service=session_service,
        notification_service=notification_service,
    )
