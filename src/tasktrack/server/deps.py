"""Request-scoped accessors for process-wide state held on `app.state`."""

from fastapi import Request

from tasktrack.store.task_store import TaskStore


def get_store(request: Request) -> TaskStore:
    return request.app.state.store
