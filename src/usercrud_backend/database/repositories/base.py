"""Interface shared by all user store backends."""

from __future__ import annotations

from typing import Protocol

from usercrud_backend.database.records import UserRecord


class UserRepository(Protocol):
    """Minimal driver interface the user handlers depend on.

    Implementations translate driver failures into
    :class:`~usercrud_backend.database.errors.StoreError` subclasses and keep
    the driver's message intact.
    """

    def connect(self) -> None:
        """Verify the store is reachable and prepare indexes or tables."""

    def close(self) -> None:
        """Release the underlying client."""

    def list_users(self) -> list[UserRecord]:
        """Return every stored user in store iteration order."""

    def get_by_id(self, user_id: str) -> UserRecord | None:
        """Return the user with ``user_id`` or ``None``."""

    def add(self, user: UserRecord) -> UserRecord:
        """Insert a new user and return it with its assigned ``id``."""

    def save(self, user: UserRecord) -> UserRecord:
        """Persist changes to an existing user."""

    def delete(self, user_id: str) -> bool:
        """Remove the user; return ``False`` when nothing was deleted."""
