"""tasktrack Error System.

Provides structured error handling with:
- Numeric error codes for programmatic handling
- Fixed user-facing messages (the HTTP layer returns these verbatim)
- HTTP status mapping for the API
- Context for debugging
"""


from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Numeric error codes organized by category.

    Format: XYYY where X = category, YYY = specific error

    Categories:
        4xxx - Task/store errors
        5xxx - Configuration errors
    """

    # 4xxx - Task/Store Errors
    TASK_NOT_FOUND = 4001
    TASK_INVALID = 4002
    STORE_FAILURE = 4003
    REQUEST_INVALID = 4004

    # 5xxx - Configuration Errors
    CONFIG_INVALID = 5001

    @property
    def category(self) -> str:
        """Get the error category name."""
        prefix = self.value // 1000
        return {
            4: "store",
            5: "config",
        }.get(prefix, "unknown")


# User-facing messages. The task messages are part of the HTTP contract.
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.TASK_NOT_FOUND: "Task not found.",
    ErrorCode.TASK_INVALID: "Invalid task: {detail}",
    ErrorCode.STORE_FAILURE: "Internal server error.",
    ErrorCode.REQUEST_INVALID: "Invalid request: {detail}",
    ErrorCode.CONFIG_INVALID: "Invalid configuration for '{key}': {detail}",
}


HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.TASK_NOT_FOUND: 404,
    ErrorCode.TASK_INVALID: 422,
    ErrorCode.STORE_FAILURE: 500,
    ErrorCode.REQUEST_INVALID: 422,
    ErrorCode.CONFIG_INVALID: 500,
}


class TaskTrackError(Exception):
    """Base error type for all tasktrack errors.

    Example:
        >>> err = TaskTrackError(ErrorCode.TASK_NOT_FOUND, context={"task_id": 999})
        >>> print(err)
        [TT-4001] Task not found.
        >>> err.http_status
        404
    """

    def __init__(
        self,
        code: ErrorCode,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self.code = code
        self.context = context or {}
        self.cause = cause
        super().__init__(str(self))

    @property
    def message(self) -> str:
        """Get the formatted user-facing message."""
        template = ERROR_MESSAGES.get(self.code, "An error occurred: {detail}")
        try:
            return template.format(**self.context)
        except KeyError:
            # Fallback if context doesn't have all keys
            return template

    @property
    def http_status(self) -> int:
        return HTTP_STATUS.get(self.code, 500)

    @property
    def category(self) -> str:
        """Get the error category."""
        return self.code.category

    @property
    def error_id(self) -> str:
        """Get the error ID string (e.g., 'TT-4001')."""
        return f"TT-{self.code.value}"

    def __str__(self) -> str:
        return f"[{self.error_id}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, context={self.context!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict for logging."""
        return {
            "error_id": self.error_id,
            "code": self.code.value,
            "category": self.category,
            "message": self.message,
            "context": self.context,
        }


class NotFound(TaskTrackError):
    """The requested task id has no corresponding record."""

    def __init__(self, task_id: int, cause: Exception | None = None):
        super().__init__(ErrorCode.TASK_NOT_FOUND, context={"task_id": task_id}, cause=cause)


class InvalidTask(TaskTrackError):
    """Task fields failed the store's presence checks."""

    def __init__(self, detail: str):
        super().__init__(ErrorCode.TASK_INVALID, context={"detail": detail})


class InternalError(TaskTrackError):
    """Storage-layer failure (connection loss, constraint violation)."""

    def __init__(self, operation: str, cause: Exception | None = None):
        super().__init__(
            ErrorCode.STORE_FAILURE,
            context={"operation": operation, "detail": str(cause) if cause else ""},
            cause=cause,
        )


def config_error(key: str, detail: str, cause: Exception | None = None) -> TaskTrackError:
    """Create a configuration error."""
    return TaskTrackError(
        code=ErrorCode.CONFIG_INVALID,
        context={"key": key, "detail": detail},
        cause=cause,
    )
