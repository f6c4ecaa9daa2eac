"""Pytest fixtures for tasktrack tests."""

import os
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from tasktrack.foundation.config import TaskTrackConfig, reset_config
from tasktrack.server.main import create_app
from tasktrack.store.database import Database
from tasktrack.store.task_store import TaskStore


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep TASKTRACK_* variables from the host out of every test."""
    for key in list(os.environ):
        if key.startswith("TASKTRACK_"):
            monkeypatch.delenv(key)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def database() -> Iterator[Database]:
    """An initialized in-memory database."""
    db = Database("sqlite://")
    db.init()
    yield db
    db.shutdown()


@pytest.fixture
def store(database: Database) -> TaskStore:
    return TaskStore(database)


@pytest.fixture
def client(database: Database) -> Iterator[TestClient]:
    """A test client whose app serves the `database` fixture."""
    app = create_app(config=TaskTrackConfig(), database=database)
    with TestClient(app) as client:
        yield client
