"""Stand-in store for a connection string that could not be used."""

from __future__ import annotations

from usercrud_backend.database.errors import StoreError
from usercrud_backend.database.records import UserRecord


class UnavailableUserRepository:
    """Fails every operation with the error raised while building the store."""

    def __init__(self, error: StoreError) -> None:
        self.error = error

    def _error(self) -> StoreError:
        return StoreError(self.error.message)

    def connect(self) -> None:
        raise self._error()

    def close(self) -> None:
        pass

    def list_users(self) -> list[UserRecord]:
        raise self._error()

    def get_by_id(self, user_id: str) -> UserRecord | None:
        raise self._error()

    def add(self, user: UserRecord) -> UserRecord:
        raise self._error()

    def save(self, user: UserRecord) -> UserRecord:
        raise self._error()

    def delete(self, user_id: str) -> bool:
        raise self._error()
