"""Shared helpers for Supabase-backed repositories."""

from typing import Any, Protocol

import httpx
from postgrest.exceptions import APIError

from therapy_scheduler.domain.errors import StoreUnavailableError


class _Executable(Protocol):
    def execute(self) -> Any: ...


def execute(query: _Executable, action: str) -> Any:
    """Run a PostgREST query, surfacing transport and API failures uniformly."""
    try:
        return query.execute()
    except (APIError, httpx.HTTPError) as exc:
        raise StoreUnavailableError(f"Supabase {action} failed: {exc}") from exc


def first_row(response: Any, action: str) -> dict[str, Any]:
    """Return the first row of a write response or raise if none came back."""
    if not response.data:
        raise StoreUnavailableError(f"Supabase {action} returned no rows")
    return response.data[0]
