"""FastAPI application for the tasktrack HTTP API.

Routes are organized into modules under tasktrack/server/routes/:
- tasks: Task CRUD
- misc: Health

The database is process-wide state: it is attached to `app.state` when the
app is built, initialized when the app starts and shut down when it stops.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tasktrack import __version__
from tasktrack.foundation.config import TaskTrackConfig, get_config
from tasktrack.foundation.errors import ErrorCode, TaskTrackError
from tasktrack.server.routes import misc_router, tasks_router
from tasktrack.store.database import Database
from tasktrack.store.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_app(
    *,
    config: TaskTrackConfig | None = None,
    database: Database | None = None,
) -> FastAPI:
    """Create FastAPI application.

    Args:
        config: Configuration to use. If None, uses the global config.
        database: Database to serve. If None, one is built from
                  `config.database`, and the app shuts it down on exit.
                  A database passed in is left open for its owner.

    Returns:
        Configured FastAPI application.
    """
    config = config or get_config()
    owns_database = database is None
    if database is None:
        database = Database(config.database.url, echo=config.database.echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        database.init()
        logger.info("tasktrack started tasks=%s", app.state.store.count())
        try:
            yield
        finally:
            if owns_database:
                database.shutdown()

    app = FastAPI(
        title="tasktrack",
        description="Minimal task-tracking API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.database = database
    app.state.store = TaskStore(database)

    app.include_router(tasks_router)
    app.include_router(misc_router)

    app.add_exception_handler(TaskTrackError, _handle_task_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)

    return app


async def _handle_task_error(request: Request, exc: TaskTrackError) -> JSONResponse:
    """Map store errors to `{"error": message}` with the code's HTTP status."""
    if exc.http_status >= 500:
        logger.error("%s %s failed: %r", request.method, request.url.path, exc)
    else:
        logger.debug("%s %s -> %s %s", request.method, request.url.path, exc.http_status, exc.error_id)
    return JSONResponse(status_code=exc.http_status, content={"error": exc.message})


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else str(err.get("msg", "invalid")))
    return "; ".join(parts) or "malformed request"


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request parsing failures in the same `{"error": ...}` shape as store errors."""
    error = TaskTrackError(
        ErrorCode.REQUEST_INVALID,
        context={"detail": _describe_validation_errors(exc)},
    )
    return await _handle_task_error(request, error)
