"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from therapy_scheduler.config import Settings
from therapy_scheduler.containers import AppContainer
from therapy_scheduler.domain.actors import TherapistRecord, UserRecord
from therapy_scheduler.domain.errors import NotFoundError, StoreUnavailableError
from therapy_scheduler.domain.notifications import (
    NotificationDraft,
    NotificationRecord,
)
from therapy_scheduler.domain.sessions import SessionRecord, SessionStatus
from therapy_scheduler.services.actors import (
    ActorResolver,
    TherapistRepository,
    UserRepository,
)
from therapy_scheduler.services.notifications import (
    NotificationRepository,
    NotificationService,
)
from therapy_scheduler.services.sessions import SessionRepository, SessionService

# A syntactically valid JWT so the Supabase client accepts it.
TEST_SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
    "c2lnbmF0dXJl"
)
SESSION_DATE = datetime(2026, 11, 2, 10, 0, tzinfo=UTC)


@dataclass
class TickingClock:
    """Clock that advances one minute on every call."""

    current: datetime = datetime(2026, 10, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(minutes=1)
        return value


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user lookup for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def add(self, first_name: str = "Ada", last_name: str = "Client") -> UserRecord:
        user = UserRecord(id=uuid4(), first_name=first_name, last_name=last_name)
        self.users[user.id] = user
        return user

    def get_user(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)


@dataclass
class InMemoryTherapistRepository(TherapistRepository):
    """In-memory therapist lookup for tests."""

    therapists: dict[UUID, TherapistRecord] = field(default_factory=dict)

    def add(
        self, first_name: str = "Grace", last_name: str = "Hopper"
    ) -> TherapistRecord:
        therapist = TherapistRecord(
            id=uuid4(), first_name=first_name, last_name=last_name
        )
        self.therapists[therapist.id] = therapist
        return therapist

    def get_therapist(self, therapist_id: UUID) -> TherapistRecord | None:
        return self.therapists.get(therapist_id)


@dataclass
class InMemoryNotificationRepository(NotificationRepository):
    """In-memory notification repository for tests."""

    notifications: dict[UUID, NotificationRecord] = field(default_factory=dict)

    def create_notification(self, draft: NotificationDraft) -> NotificationRecord:
        record = NotificationRecord(
            id=uuid4(),
            user_id=draft.user_id,
            session_id=draft.session_id,
            title=draft.title,
            message=draft.message,
            type=draft.type,
            read=draft.read,
            created_at=draft.created_at,
        )
        self.notifications[record.id] = record
        return record

    def get_notification(self, notification_id: UUID) -> NotificationRecord | None:
        return self.notifications.get(notification_id)

    def list_by_user(self, user_id: UUID) -> list[NotificationRecord]:
        return sorted(
            (n for n in self.notifications.values() if n.user_id == user_id),
            key=lambda n: n.created_at,
            reverse=True,
        )

    def list_unread_by_user(self, user_id: UUID) -> list[NotificationRecord]:
        return [n for n in self.list_by_user(user_id) if not n.read]

    def mark_read(self, notification_id: UUID) -> NotificationRecord | None:
        current = self.notifications.get(notification_id)
        if current is None:
            return None
        updated = replace(current, read=True)
        self.notifications[notification_id] = updated
        return updated

    def delete_notification(self, notification_id: UUID) -> None:
        self.notifications.pop(notification_id, None)


@dataclass
class InMemorySessionRepository(SessionRepository):
    """In-memory session repository; updates and notices commit together."""

    notifications: InMemoryNotificationRepository
    sessions: dict[UUID, SessionRecord] = field(default_factory=dict)
    fail_updates: bool = False

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
        session = SessionRecord(
            id=uuid4(),
            user_id=user_id,
            therapist_id=therapist_id,
            session_date=session_date,
            duration_minutes=duration_minutes,
            session_type=session_type,
            status=status,
            notes=notes,
        )
        self.sessions[session.id] = session
        return session

    def get_session(self, session_id: UUID) -> SessionRecord | None:
        return self.sessions.get(session_id)

    def list_sessions(self) -> list[SessionRecord]:
        return sorted(self.sessions.values(), key=lambda s: s.session_date)

    def list_by_user(self, user_id: UUID) -> list[SessionRecord]:
        return [s for s in self.list_sessions() if s.user_id == user_id]

    def list_by_therapist(self, therapist_id: UUID) -> list[SessionRecord]:
        return [s for s in self.list_sessions() if s.therapist_id == therapist_id]

    def list_by_status(self, status: SessionStatus) -> list[SessionRecord]:
        return [s for s in self.list_sessions() if s.status == status]

    def list_by_user_and_status(
        self, user_id: UUID, status: SessionStatus
    ) -> list[SessionRecord]:
        return [
            s
            for s in self.list_sessions()
            if s.user_id == user_id and s.status == status
        ]

    def list_in_date_range(
        self, start: datetime, end: datetime
    ) -> list[SessionRecord]:
        return [s for s in self.list_sessions() if start <= s.session_date <= end]

    def update_session(
        self,
        session: SessionRecord,
        notification: NotificationDraft | None = None,
    ) -> SessionRecord:
        if self.fail_updates:
            raise StoreUnavailableError("store offline")
        if session.id not in self.sessions:
            raise NotFoundError("session", session.id)
        self.sessions[session.id] = session
        if notification is not None:
            self.notifications.create_notification(notification)
        return session

    def delete_session(self, session_id: UUID) -> None:
        self.sessions.pop(session_id, None)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=TEST_SERVICE_KEY,
    )


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def therapist_repository() -> InMemoryTherapistRepository:
    return InMemoryTherapistRepository()


@pytest.fixture
def notification_repository() -> InMemoryNotificationRepository:
    return InMemoryNotificationRepository()


@pytest.fixture
def session_repository(
    notification_repository: InMemoryNotificationRepository,
) -> InMemorySessionRepository:
    return InMemorySessionRepository(notifications=notification_repository)


@pytest.fixture
def user(user_repository: InMemoryUserRepository) -> UserRecord:
    return user_repository.add()


@pytest.fixture
def therapist(therapist_repository: InMemoryTherapistRepository) -> TherapistRecord:
    return therapist_repository.add()


@pytest.fixture
def session_service(
    session_repository: InMemorySessionRepository,
    user_repository: InMemoryUserRepository,
    therapist_repository: InMemoryTherapistRepository,
    clock: TickingClock,
) -> SessionService:
    return SessionService(
        session_repository=session_repository,
        actors=ActorResolver(
            user_repository=user_repository,
            therapist_repository=therapist_repository,
        ),
        clock=clock,
    )


@pytest.fixture
def notification_service(
    notification_repository: InMemoryNotificationRepository, clock: TickingClock
) -> NotificationService:
    return NotificationService(notification_repository, clock=clock)


@pytest.fixture
def scheduled_session(
    session_service: SessionService,
    user: UserRecord,
    therapist: TherapistRecord,
) -> SessionRecord:
    return session_service.create_session(
        user_id=user.id,
        therapist_id=therapist.id,
        session_date=SESSION_DATE,
        duration_minutes=50,
        session_type="online",
    )


@pytest.fixture
def container(
    settings: Settings,
    session_service: SessionService,
    notification_service: NotificationService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        session_service=session_service,
        notification_service=notification_service,
    )
