"""Process-wide database handle.

One `Database` is created at startup, `init()`-ed once, shared by every
request through the app state, and `shutdown()` once at exit.

In-memory SQLite URLs are pinned to a single shared connection so every
session (and every server thread) sees the same data. That connection also
shares one transaction, so in-memory databases are for tests only.
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tasktrack.foundation.errors import InternalError
from tasktrack.store.models import Base

logger = logging.getLogger(__name__)


def is_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


class Database:
    """SQLAlchemy engine and session factory with an explicit lifecycle."""

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = url
        self.echo = echo
        self._engine: Engine | None = None
        self._sessions: sessionmaker[Session] | None = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database.init() has not been called")
        return self._engine

    def _create_engine(self) -> Engine:
        if is_memory_sqlite(self.url):
            return create_engine(
                self.url,
                echo=self.echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        if make_url(self.url).get_backend_name() == "sqlite":
            return create_engine(
                self.url,
                echo=self.echo,
                connect_args={"check_same_thread": False},
            )
        return create_engine(self.url, echo=self.echo, pool_pre_ping=True)

    def init(self) -> None:
        """Create the engine and the `tasks` table if missing. Idempotent."""
        with self._lock:
            if self._engine is None:
                self._engine = self._create_engine()
                self._sessions = sessionmaker(bind=self._engine, expire_on_commit=False)
            try:
                Base.metadata.create_all(self._engine)
            except SQLAlchemyError as e:
                logger.exception("Schema creation failed url=%s", self.url)
                raise InternalError("init", cause=e) from e
        logger.info("Database ready url=%s", self.url)

    def reset(self) -> None:
        """Drop and recreate every table."""
        self.init()
        try:
            Base.metadata.drop_all(self.engine)
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            logger.exception("Schema reset failed url=%s", self.url)
            raise InternalError("reset", cause=e) from e
        logger.info("Database reset url=%s", self.url)

    def shutdown(self) -> None:
        """Dispose the engine. Safe to call more than once."""
        with self._lock:
            if self._engine is None:
                return
            self._engine.dispose()
            self._engine = None
            self._sessions = None
        logger.info("Database closed url=%s", self.url)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session; commit on success, roll back on error."""
        if self._sessions is None:
            raise RuntimeError("Database.init() has not been called")
        session = self._sessions()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
