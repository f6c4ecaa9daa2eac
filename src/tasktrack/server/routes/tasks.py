"""Task CRUD routes.

Each route issues exactly one store call. Store errors propagate to the
app-level `TaskTrackError` handler, which turns them into `{"error": ...}`.
"""

from fastapi import APIRouter, Depends

from tasktrack.foundation.errors import NotFound
from tasktrack.server.deps import get_store
from tasktrack.server.routes._models import (
    CreateTaskRequest,
    ErrorResponse,
    MessageResponse,
    TaskResponse,
    UpdateTaskRequest,
)
from tasktrack.store.task_store import TaskStore

router = APIRouter(prefix="/tasks", tags=["tasks"])

_NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("")
def list_tasks(store: TaskStore = Depends(get_store)) -> list[TaskResponse]:
    """List all tasks in creation order."""
    return [TaskResponse.from_record(t) for t in store.list_all()]


@router.post("")
def create_task(
    request: CreateTaskRequest,
    store: TaskStore = Depends(get_store),
) -> TaskResponse:
    """Create a task."""
    task = store.create(
        title=request.title,
        description=request.description,
        completed=request.completed,
    )
    return TaskResponse.from_record(task)


@router.get("/{task_id}", responses=_NOT_FOUND)
def get_task(task_id: int, store: TaskStore = Depends(get_store)) -> TaskResponse:
    """Get a single task."""
    task = store.find_by_id(task_id)
    if task is None:
        raise NotFound(task_id)
    return TaskResponse.from_record(task)


@router.patch("/{task_id}", responses=_NOT_FOUND)
def update_task(
    task_id: int,
    request: UpdateTaskRequest,
    store: TaskStore = Depends(get_store),
) -> MessageResponse:
    """Set the completion flag of a task."""
    store.update(task_id, request.completed)
    return MessageResponse(message="Task updated successfully.")


@router.delete("/{task_id}", responses=_NOT_FOUND)
def delete_task(task_id: int, store: TaskStore = Depends(get_store)) -> MessageResponse:
    """Delete a task."""
    store.delete(task_id)
    return MessageResponse(message="Task successfully deleted.")
