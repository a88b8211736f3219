"""SQLAlchemy schemas."""

from usercrud_backend.database.schemas.user import UserSchema

__all__ = ["UserSchema"]
