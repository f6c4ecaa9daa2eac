"""Task persistence: schema, database lifecycle, CRUD store."""

from tasktrack.store.database import Database
from tasktrack.store.models import Base, TaskRecord, TaskRow
from tasktrack.store.task_store import TaskStore

__all__ = [
    "Base",
    "Database",
    "TaskRecord",
    "TaskRow",
    "TaskStore",
]
