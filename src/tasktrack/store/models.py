"""Task schema and record types.

`TaskRow` is the SQLAlchemy mapping of the `tasks` table. It never leaves
the store: callers get frozen `TaskRecord` values instead.
"""

from dataclasses import asdict, dataclass
from typing import Any

from sqlalchemy import Boolean, Integer, Text, false
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class TaskRow(Base):
    """SQLAlchemy model for the `tasks` table."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    def __repr__(self) -> str:
        return f"TaskRow(id={self.id!r}, title={self.title!r}, completed={self.completed!r})"


@dataclass(frozen=True, slots=True)
class TaskRecord:
    """A stored task as seen by callers of the store."""

    id: int
    title: str
    description: str | None
    completed: bool

    @classmethod
    def from_row(cls, row: TaskRow) -> "TaskRecord":
        return cls(
            id=row.id,
            title=row.title,
            description=row.description,
            completed=bool(row.completed),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict for JSON responses."""
        return asdict(self)
