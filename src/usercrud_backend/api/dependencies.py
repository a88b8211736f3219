"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from fastapi import Depends

from usercrud_backend.api.services import UserService
from usercrud_backend.database import UserRepository, get_user_repository


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    """Return a :class:`UserService` bound to the application's repository."""

    return UserService(repository)


__all__ = ["get_user_service"]
