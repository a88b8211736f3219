"""Pydantic models for the user resource endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "65f1c2a9e4b0a1b2c3d4e5f6",
                "name": "John Doe",
                "email": "john.doe@example.com",
                "password": "password123",
            }
        },
    )

    id_: str = Field(alias="id", description="The auto-generated id of the user")
    name: str = Field(description="The name of the user")
    email: str = Field(description="The email of the user")
    password: str = Field(description="The password of the user")


def _to_text(value: Any) -> Any:
    """Cast JSON scalars to text the way the document store does."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


class UserCreateRequest(BaseModel):
    """Payload for creating a user.

    Fields are optional here so that a missing value is rejected by the store
    with its own message instead of by request parsing. Numbers and booleans
    are stored as their text form.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def cast_scalars(cls, value: Any) -> Any:
        return _to_text(value)


class UserUpdateRequest(BaseModel):
    """Partial update; falsy or absent fields keep their stored value."""

    name: str | None = None
    email: str | None = None
    password: str | None = None

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def drop_falsy(cls, value: Any) -> Any:
        if isinstance(value, (str, int, float, bool)) and not value:
            return None
        return _to_text(value)


class MessageResponse(BaseModel):
    """Plain acknowledgement or error body."""

    message: str


class UserCreatedResponse(BaseModel):
    """Response returned after a successful creation."""

    message: str
    user: UserResponse


class UserUpdatedResponse(BaseModel):
    """Response returned after a successful update."""

    message: str
    user: UserResponse
