"""SQLAlchemy task store.

Thread-safety:
- each method opens its own session from the shared `Database`
- every public method issues a single unit of work
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from tasktrack.foundation.errors import InternalError, InvalidTask, NotFound
from tasktrack.store.database import Database
from tasktrack.store.models import TaskRecord, TaskRow

logger = logging.getLogger(__name__)


def _check_title(title: Any) -> str:
    if not isinstance(title, str) or not title.strip():
        raise InvalidTask("title is required")
    return title


class TaskStore:
    """CRUD operations on the `tasks` table."""

    def __init__(self, database: Database) -> None:
        self._db = database

    # ---- public API ----

    def count(self) -> int:
        try:
            with self._db.session() as session:
                return int(session.scalar(select(func.count()).select_from(TaskRow)) or 0)
        except SQLAlchemyError as e:
            logger.exception("Task count failed")
            raise InternalError("count", cause=e) from e

    def list_all(self) -> list[TaskRecord]:
        """Return every task in insertion order."""
        try:
            with self._db.session() as session:
                rows = session.scalars(select(TaskRow).order_by(TaskRow.id)).all()
                return [TaskRecord.from_row(r) for r in rows]
        except SQLAlchemyError as e:
            logger.exception("Task listing failed")
            raise InternalError("list_all", cause=e) from e

    def create(
        self,
        title: str,
        description: str | None = None,
        completed: bool = False,
    ) -> TaskRecord:
        """Persist a new task and return it with its assigned id.

        Raises:
            InvalidTask: if title is missing or blank.
            InternalError: on storage failure.
        """
        title = _check_title(title)
        row = TaskRow(title=title, description=description, completed=bool(completed))
        try:
            with self._db.session() as session:
                session.add(row)
                session.flush()
                record = TaskRecord.from_row(row)
        except SQLAlchemyError as e:
            logger.exception("Task create failed title=%r", title)
            raise InternalError("create", cause=e) from e
        logger.debug("Task added id=%s completed=%s", record.id, record.completed)
        return record

    def bulk_create(self, items: Iterable[Mapping[str, Any]]) -> list[TaskRecord]:
        """Create several tasks in one session, preserving order."""
        rows = [
            TaskRow(
                title=_check_title(item.get("title")),
                description=item.get("description"),
                completed=bool(item.get("completed", False)),
            )
            for item in items
        ]
        try:
            with self._db.session() as session:
                session.add_all(rows)
                session.flush()
                records = [TaskRecord.from_row(r) for r in rows]
        except SQLAlchemyError as e:
            logger.exception("Task bulk create failed n=%d", len(rows))
            raise InternalError("bulk_create", cause=e) from e
        logger.debug("Tasks added n=%d", len(records))
        return records

    def find_by_id(self, task_id: int) -> TaskRecord | None:
        """Primary-key lookup. Returns None when the task does not exist."""
        try:
            with self._db.session() as session:
                row = session.get(TaskRow, int(task_id))
                return TaskRecord.from_row(row) if row else None
        except SQLAlchemyError as e:
            logger.exception("Task lookup failed id=%s", task_id)
            raise InternalError("find_by_id", cause=e) from e

    def update(self, task_id: int, completed: bool | None) -> bool:
        """Set `completed` on an existing task.

        Existence is checked before the new value, so an unknown id is
        always NotFound.

        Raises:
            NotFound: if no task has this id.
            InvalidTask: if completed is None.
        """
        try:
            with self._db.session() as session:
                row = session.get(TaskRow, int(task_id))
                if row is None:
                    raise NotFound(task_id)
                if completed is None:
                    raise InvalidTask("completed is required")
                row.completed = bool(completed)
        except SQLAlchemyError as e:
            logger.exception("Task update failed id=%s", task_id)
            raise InternalError("update", cause=e) from e
        logger.debug("Task updated id=%s completed=%s", task_id, bool(completed))
        return True

    def delete(self, task_id: int) -> bool:
        """Remove an existing task.

        Raises:
            NotFound: if no task has this id.
        """
        try:
            with self._db.session() as session:
                row = session.get(TaskRow, int(task_id))
                if row is None:
                    raise NotFound(task_id)
                session.delete(row)
        except SQLAlchemyError as e:
            logger.exception("Task delete failed id=%s", task_id)
            raise InternalError("delete", cause=e) from e
        logger.debug("Task deleted id=%s", task_id)
        return True
