"""Database schema specific tests."""

from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from sqlalchemy import Table

from usercrud_backend.database.schemas import UserSchema


def test_user_schema_email_is_unique() -> None:
    table = cast("Table", UserSchema.__table__)
    assert table.c.email.unique
    assert not table.c.email.nullable


def test_user_schema_required_columns() -> None:
    table = cast("Table", UserSchema.__table__)
    assert {column.name for column in table.c if not column.nullable} == {
        "id",
        "name",
        "email",
        "password",
    }
