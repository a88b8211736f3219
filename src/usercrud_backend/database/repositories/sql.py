"""SQLAlchemy-backed user store."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from usercrud_backend.database.errors import DuplicateEmailError, StoreError
from usercrud_backend.database.records import UserRecord
from usercrud_backend.database.schemas import UserSchema
from usercrud_backend.database.service import DatabaseService

logger = logging.getLogger(__name__)


@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except IntegrityError as exc:
        raise DuplicateEmailError(str(exc.orig)) from exc
    except SQLAlchemyError as exc:
        raise StoreError(str(exc)) from exc


def _to_record(row: UserSchema) -> UserRecord:
    return UserRecord(id=row.id, name=row.name, email=row.email, password=row.password)


class SqlUserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`."""

    def __init__(self, database: DatabaseService) -> None:
        self._database = database

    @classmethod
    def from_url(cls, url: str) -> SqlUserRepository:
        """Build a repository for a SQLAlchemy URL; unusable URLs raise StoreError."""

        try:
            database = DatabaseService(url)
        except (SQLAlchemyError, ImportError) as exc:
            raise StoreError(str(exc)) from exc
        return cls(database)

    def connect(self) -> None:
        with _translate_errors():
            self._database.create_schema()
        logger.info("SQL user store ready at %s", self._database.engine.url)

    def close(self) -> None:
        self._database.dispose()

    def list_users(self) -> list[UserRecord]:
        with _translate_errors(), self._database.session() as session:
            rows = session.scalars(select(UserSchema))
            return [_to_record(row) for row in rows]

    def get_by_id(self, user_id: str) -> UserRecord | None:
        with _translate_errors(), self._database.session() as session:
            row = session.get(UserSchema, user_id)
            return _to_record(row) if row is not None else None

    def add(self, user: UserRecord) -> UserRecord:
        user.validate()
        with _translate_errors(), self._database.session() as session:
            row = UserSchema(name=user.name, email=user.email, password=user.password)
            session.add(row)
            session.flush()
            return _to_record(row)

    def save(self, user: UserRecord) -> UserRecord:
        user.validate()
        with _translate_errors(), self._database.session() as session:
            row = session.get(UserSchema, user.id)
            if row is None:
                msg = f"No user found for id {user.id}"
                raise StoreError(msg)
            row.name = user.name
            row.email = user.email
            row.password = user.password
            session.flush()
            return _to_record(row)

    def delete(self, user_id: str) -> bool:
        with _translate_errors(), self._database.session() as session:
            row = session.get(UserSchema, user_id)
            if row is None:
                return False
            session.delete(row)
            return True
