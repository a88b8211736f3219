"""User database schema."""

from uuid import uuid4

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from usercrud_backend.database.base import BaseSchema


def _new_id() -> str:
    return str(uuid4())


class UserSchema(BaseSchema):
    """SQLAlchemy model for users stored by the SQL backend."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
