"""User resource operations on top of a :class:`UserRepository`."""

from __future__ import annotations

from usercrud_backend.database import UserRecord, UserRepository


class UserNotFoundError(Exception):
    """Raised when no user exists for the requested identifier."""


class UserService:
    """Implements list, create, get, update and delete for users.

    Store failures are not caught here; they propagate as
    :class:`~usercrud_backend.database.StoreError` so the caller can choose
    the status code for each operation.
    """

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def list_users(self) -> list[UserRecord]:
        return self._repository.list_users()

    def create_user(
        self,
        *,
        name: str | None,
        email: str | None,
        password: str | None,
    ) -> UserRecord:
        user = UserRecord(name=name, email=email, password=password)
        return self._repository.add(user)

    def get_user(self, user_id: str) -> UserRecord:
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def update_user(
        self,
        user_id: str,
        *,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> UserRecord:
        """Replace each field only when a truthy value is supplied.

        An empty string counts as absent and keeps the stored value.
        """

        user = self.get_user(user_id)
        user.name = name or user.name
        user.email = email or user.email
        user.password = password or user.password
        return self._repository.save(user)

    def delete_user(self, user_id: str) -> None:
        self.get_user(user_id)
        if not self._repository.delete(user_id):
            raise UserNotFoundError(user_id)
