"""Database session management utilities for the SQL backend."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from usercrud_backend.database.base import BaseSchema


def _engine_options(url: str) -> dict[str, Any]:
    """Share a single connection for in-memory sqlite across threads."""

    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return {}
    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        options["poolclass"] = StaticPool
    return options


class DatabaseService:
    """Wraps SQLAlchemy engine and session factory."""

    def __init__(self, url: str) -> None:
        self._engine = create_engine(url, future=True, **_engine_options(url))
        self._session_factory = sessionmaker(
            bind=self._engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            class_=Session,
        )

    @property
    def engine(self) -> Engine:
        """Expose the SQLAlchemy engine."""

        return self._engine

    def create_schema(self) -> None:
        """Verify connectivity and create missing tables."""

        with self._engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        BaseSchema.metadata.create_all(self._engine)

    def dispose(self) -> None:
        self._engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a transactional session scope."""

        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
