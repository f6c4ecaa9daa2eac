"""Foundation domain - base config, errors, logging.

Everything else imports from here; nothing here imports from the store
or the server.
"""

from tasktrack.foundation.config import (
    DatabaseConfig,
    ServerConfig,
    TaskTrackConfig,
    get_config,
    load_config,
    reset_config,
)
from tasktrack.foundation.errors import (
    ERROR_MESSAGES,
    HTTP_STATUS,
    ErrorCode,
    InternalError,
    InvalidTask,
    NotFound,
    TaskTrackError,
    config_error,
)
from tasktrack.foundation.logging import configure_logging

__all__ = [
    # Config
    "DatabaseConfig",
    "ServerConfig",
    "TaskTrackConfig",
    "get_config",
    "load_config",
    "reset_config",
    # Errors
    "ERROR_MESSAGES",
    "HTTP_STATUS",
    "ErrorCode",
    "InternalError",
    "InvalidTask",
    "NotFound",
    "TaskTrackError",
    "config_error",
    # Logging
    "configure_logging",
]
