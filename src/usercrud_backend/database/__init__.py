"""Store records, errors and backends for user persistence."""

from usercrud_backend.database.base import BaseSchema
from usercrud_backend.database.dependencies import get_user_repository
from usercrud_backend.database.errors import (
    DuplicateEmailError,
    InvalidUserIdError,
    StoreError,
    UserValidationError,
)
from usercrud_backend.database.records import UserRecord
from usercrud_backend.database.repositories import (
    MongoUserRepository,
    SqlUserRepository,
    UnavailableUserRepository,
    UserRepository,
    create_user_repository,
)
from usercrud_backend.database.schemas import UserSchema
from usercrud_backend.database.service import DatabaseService

__all__ = [
    "BaseSchema",
    "DatabaseService",
    "DuplicateEmailError",
    "InvalidUserIdError",
    "MongoUserRepository",
    "SqlUserRepository",
    "StoreError",
    "UserRecord",
    "UserRepository",
    "UnavailableUserRepository",
    "UserSchema",
    "UserValidationError",
    "create_user_repository",
    "get_user_repository",
]
