"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from therapy_scheduler.api.notifications import router as notifications_router
from therapy_scheduler.api.sessions import router as sessions_router
from therapy_scheduler.app_logging import configure_logging
from therapy_scheduler.containers import AppContainer
from therapy_scheduler.domain.errors import (
    NotFoundError,
    ReferenceNotFoundError,
    SchedulerError,
    StoreUnavailableError,
)

_STATUS_BY_ERROR: dict[type[SchedulerError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ReferenceNotFoundError: status.HTTP_400_BAD_REQUEST,
    StoreUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Therapy Scheduler")
    app.state.container = container

    app.include_router(sessions_router)
    app.include_router(notifications_router)

    @app.exception_handler(SchedulerError)
    async def scheduler_error_handler(
        request: Request, exc: SchedulerError
    ) -> JSONResponse:
        status_code = _STATUS_BY_ERROR.get(
            type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Request failed: %s %s",
                request.method,
                request.url.path,
                exc_info=exc,
            )
        return JSONResponse(
            status_code=status_code,
            content={"error": exc.kind, "detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
