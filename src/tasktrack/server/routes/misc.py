"""Miscellaneous routes: health."""

from fastapi import APIRouter, Depends

from tasktrack.server.deps import get_store
from tasktrack.server.routes._models import HealthResponse
from tasktrack.store.task_store import TaskStore

router = APIRouter(tags=["misc"])


@router.get("/health")
def health(store: TaskStore = Depends(get_store)) -> HealthResponse:
    """Liveness check that also touches the database."""
    return HealthResponse(status="ok", tasks=store.count())
