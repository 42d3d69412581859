"""Session endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status
from pydantic import AwareDatetime  # noqa: TC002

from therapy_scheduler.api.schemas import (
    SessionCreateRequest,
    SessionStatusRequest,
    SessionUpdateRequest,
    serialize_session,
)
from therapy_scheduler.domain.sessions import SessionStatus  # noqa: TC001

if TYPE_CHECKING:
    from therapy_scheduler.services.sessions import SessionService

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


def _service(request: Request) -> SessionService:
    return request.app.state.container.session_service


@router.get("")
async def list_sessions(request: Request) -> dict[str, object]:
    """Return every session."""
    sessions = _service(request).list_sessions()
    return {"sessions": [serialize_session(session) for session in sessions]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_session(
    payload: SessionCreateRequest, request: Request
) -> dict[str, object]:
    """Book a new session."""
    session = _service(request).create_session(
        user_id=payload.user_id,
        therapist_id=payload.therapist_id,
        session_date=payload.session_date,
        duration_minutes=payload.duration_minutes,
        session_type=payload.session_type,
        notes=payload.notes,
    )
    return serialize_session(session)


@router.get("/range")
async def sessions_in_range(
    start: AwareDatetime, end: AwareDatetime, request: Request
) -> dict[str, object]:
    """Return sessions dated within [start, end]."""
    sessions = _service(request).list_in_range(start, end)
    return {"sessions": [serialize_session(session) for session in sessions]}


@router.get("/user/{user_id}")
async def sessions_for_user(user_id: UUID, request: Request) -> dict[str, object]:
    """Return a user's sessions."""
    sessions = _service(request).list_by_user(user_id)
    return {"sessions": [serialize_session(session) for session in sessions]}


@router.get("/user/{user_id}/upcoming")
async def upcoming_sessions(user_id: UUID, request: Request) -> dict[str, object]:
    """Return a user's scheduled sessions."""
    sessions = _service(request).list_upcoming(user_id)
    return {"sessions": [serialize_session(session) for session in sessions]}


@router.get("/therapist/{therapist_id}")
async def sessions_for_therapist(
    therapist_id: UUID, request: Request
) -> dict[str, object]:
    """Return a therapist's sessions."""
    sessions = _service(request).list_by_therapist(therapist_id)
    return {"sessions": [serialize_session(session) for session in sessions]}


@router.get("/status/{session_status}")
async def sessions_by_status(
    session_status: SessionStatus, request: Request
) -> dict[str, object]:
    """Return sessions in a status."""
    sessions = _service(request).list_by_status(session_status)
    return {"sessions": [serialize_session(session) for session in sessions]}


@router.get("/{session_id}")
async def get_session(session_id: UUID, request: Request) -> dict[str, object]:
    """Return one session."""
    session = _service(request).get_session(session_id)
    if session is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_session(session)


@router.put("/{session_id}")
async def update_session(
    session_id: UUID, payload: SessionUpdateRequest, request: Request
) -> dict[str, object]:
    """Replace a session's mutable fields."""
    session = _service(request).update_session(session_id, payload.to_changes())
    return serialize_session(session)


@router.put("/{session_id}/status")
async def update_session_status(
    session_id: UUID, payload: SessionStatusRequest, request: Request
) -> dict[str, object]:
    """Move a session to a new status."""
    session = _service(request).update_session_status(session_id, payload.status)
    return serialize_session(session)


@router.delete("/{session_id}")
async def delete_session(session_id: UUID, request: Request) -> dict[str, str]:
    """Delete a session."""
    _service(request).delete_session(session_id)
    return {"status": "ok"}
