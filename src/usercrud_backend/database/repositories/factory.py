"""User repository factory selecting the backend from the connection string."""

from __future__ import annotations

from usercrud_backend.database.repositories.base import UserRepository
from usercrud_backend.database.repositories.mongo import MongoUserRepository
from usercrud_backend.database.repositories.sql import SqlUserRepository

MONGO_SCHEMES = ("mongodb://", "mongodb+srv://")


def create_user_repository(url: str) -> UserRepository:
    """Create the repository implementation matching ``url``.

    ``mongodb://`` and ``mongodb+srv://`` URLs are served by
    :class:`MongoUserRepository`; anything else is treated as a SQLAlchemy
    URL (for example ``sqlite:///users.db``). Raises :class:`StoreError`
    when the URL cannot be used to build a client.
    """

    if url.startswith(MONGO_SCHEMES):
        return MongoUserRepository.from_url(url)
    return SqlUserRepository.from_url(url)
