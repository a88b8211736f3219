"""User store backends."""

from usercrud_backend.database.repositories.base import UserRepository
from usercrud_backend.database.repositories.factory import create_user_repository
from usercrud_backend.database.repositories.mongo import MongoUserRepository
from usercrud_backend.database.repositories.sql import SqlUserRepository
from usercrud_backend.database.repositories.unavailable import UnavailableUserRepository

__all__ = [
    "MongoUserRepository",
    "SqlUserRepository",
    "UnavailableUserRepository",
    "UserRepository",
    "create_user_repository",
]
