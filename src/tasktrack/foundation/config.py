"""tasktrack configuration management.

Loads configuration from .tasktrack/config.yaml with sensible defaults.
All settings can be overridden via environment variables (TASKTRACK_*).

Config locations (in priority order):
1. Explicit path passed to load_config()
2. .tasktrack/config.yaml (project-local)
3. ~/.tasktrack/config.yaml (user-global)
4. Built-in defaults

Thread Safety:
    Uses threading.Lock for lazy initialization of the global config.
"""


import os
import threading
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from tasktrack.foundation.errors import config_error

ENV_PREFIX = "TASKTRACK_"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    """Relational store connection settings."""

    url: str = "sqlite:///tasktrack.db"
    """SQLAlchemy database URL."""

    echo: bool = False
    """Echo emitted SQL through the sqlalchemy.engine logger."""


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """HTTP server settings."""

    host: str = "127.0.0.1"
    """Host to bind to (127.0.0.1 for local only)."""

    port: int = 3000
    """Port to listen on."""


@dataclass(frozen=True, slots=True)
class TaskTrackConfig:
    """Root configuration for tasktrack."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    """Database configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    """Server configuration."""

    debug: bool = False
    """Enable debug logging by default."""


# Global config instance (lazy-loaded, thread-safe)
_config: TaskTrackConfig | None = None
_config_lock = threading.Lock()


def _deep_update(base: dict, updates: dict) -> dict:
    """Recursively update a dict with another dict."""
    for key, value in updates.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_update(base[key], value)
        else:
            base[key] = value
    return base


def _coerce(value: str) -> bool | int | str:
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
        return int(value)
    return value


def _as_bool(key: str, value: Any) -> bool:
    """Accept real booleans and "true"/"false" strings, nothing else."""
    if isinstance(value, str):
        value = _coerce(value.strip())
    if not isinstance(value, bool):
        raise config_error(key, f"expected true or false, got {value!r}")
    return value


def _apply_env_overrides(config_dict: dict, environ: dict[str, str] | None = None) -> dict:
    """Apply environment variable overrides.

    Environment variables follow pattern: TASKTRACK_SECTION_KEY, or
    TASKTRACK_KEY for top-level settings.

    Examples:
        TASKTRACK_DATABASE_URL=postgresql+psycopg://localhost/tasks
        TASKTRACK_SERVER_PORT=8080
        TASKTRACK_DEBUG=true
    """
    environ = os.environ if environ is None else environ
    sections = {name for name, value in config_dict.items() if isinstance(value, dict)}

    for key, value in environ.items():
        if not key.startswith(ENV_PREFIX):
            continue

        path_str = key[len(ENV_PREFIX):].lower()

        section, _, name = path_str.partition("_")
        if section in sections and name in config_dict[section]:
            config_dict[section][name] = _coerce(value)
        elif path_str in config_dict and path_str not in sections:
            config_dict[path_str] = _coerce(value)

    return config_dict


def _dict_to_config(data: dict) -> TaskTrackConfig:
    """Convert a dict to TaskTrackConfig."""
    try:
        database = DatabaseConfig(**data.get("database", {}))
        server = ServerConfig(**data.get("server", {}))
    except TypeError as e:
        raise config_error("config", str(e), cause=e) from e

    database = replace(database, echo=_as_bool("database.echo", database.echo))
    if isinstance(server.port, str):
        server = replace(server, port=_coerce(server.port.strip()))
    if not isinstance(server.port, int) or isinstance(server.port, bool):
        raise config_error("server.port", f"expected an integer, got {server.port!r}")
    if not isinstance(database.url, str) or not database.url:
        raise config_error("database.url", "must be a non-empty string")

    return TaskTrackConfig(
        database=database,
        server=server,
        debug=_as_bool("debug", data.get("debug", False)),
    )


def load_config(path: str | Path | None = None) -> TaskTrackConfig:
    """Load configuration from file with defaults and env overrides.

    Priority (highest to lowest):
    1. Environment variables (TASKTRACK_*)
    2. Explicit path if provided
    3. .tasktrack/config.yaml (project-local)
    4. ~/.tasktrack/config.yaml (user-global)
    5. Built-in defaults

    Args:
        path: Optional explicit config file path.

    Returns:
        Merged TaskTrackConfig instance.

    Raises:
        TaskTrackError: If the first config file found is not valid YAML
            or holds values of the wrong type.
    """
    global _config

    config_dict: dict[str, Any] = asdict(TaskTrackConfig())

    config_paths = []
    if path:
        config_paths.append(Path(path))
    config_paths.extend([
        Path(".tasktrack/config.yaml"),
        Path.home() / ".tasktrack" / "config.yaml",
    ])

    for config_path in config_paths:
        if config_path.exists():
            try:
                with open(config_path) as f:
                    file_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise config_error(str(config_path), "not valid YAML", cause=e) from e
            if not isinstance(file_config, dict):
                raise config_error(str(config_path), "top level must be a mapping")
            _deep_update(config_dict, file_config)
            break  # Use first found config

    config_dict = _apply_env_overrides(config_dict)

    _config = _dict_to_config(config_dict)
    return _config


def get_config() -> TaskTrackConfig:
    """Get the current configuration, loading if needed."""
    global _config

    if _config is not None:
        return _config

    with _config_lock:
        if _config is None:
            _config = load_config()
        return _config


def reset_config() -> None:
    """Reset the global config (useful for testing)."""
    global _config
    with _config_lock:
        _config = None


__all__ = [
    "DatabaseConfig",
    "ServerConfig",
    "TaskTrackConfig",
    "get_config",
    "load_config",
    "reset_config",
]
