"""Shared Pydantic models for API routes.

Request models ignore unknown fields, so clients can send a full task
object to PATCH and only `completed` is read.
"""

from pydantic import BaseModel, ConfigDict, Field

from tasktrack.store.models import TaskRecord


# ═══════════════════════════════════════════════════════════════
# REQUEST MODELS
# ═══════════════════════════════════════════════════════════════


class CreateTaskRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1)
    description: str | None = None
    completed: bool = False


class UpdateTaskRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Checked by the store after the id lookup, so unknown ids stay 404.
    completed: bool | None = None


# ═══════════════════════════════════════════════════════════════
# RESPONSE MODELS
# ═══════════════════════════════════════════════════════════════


class TaskResponse(BaseModel):
    """A stored task."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    completed: bool

    @classmethod
    def from_record(cls, record: TaskRecord) -> "TaskResponse":
        return cls.model_validate(record)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    tasks: int
