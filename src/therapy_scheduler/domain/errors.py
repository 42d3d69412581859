"""Error kinds raised by the scheduler core."""

from uuid import UUID


class SchedulerError(Exception):
    """Base class for scheduler errors."""

    kind = "scheduler_error"


class ReferenceNotFoundError(SchedulerError):
    """A user or therapist referenced by a session does not exist."""

    kind = "reference_not_found"

    def __init__(self, ref_kind: str, ref_id: UUID) -> None:
        super().__init__(f"{ref_kind.capitalize()} not found: {ref_id}")
        self.ref_kind = ref_kind
        self.ref_id = ref_id


class NotFoundError(SchedulerError):
    """The targeted session or notification does not exist."""

    kind = "not_found"

    def __init__(self, entity: str, entity_id: UUID) -> None:
        super().__init__(f"{entity.capitalize()} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class StoreUnavailableError(SchedulerError):
    """The persistence layer could not complete a read or write."""

    kind = "store_unavailable"
