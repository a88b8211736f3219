"""Models used for API request and response payloads."""

from usercrud_backend.api.models.user import (
    MessageResponse,
    UserCreatedResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdatedResponse,
    UserUpdateRequest,
)

__all__ = [
    "MessageResponse",
    "UserCreateRequest",
    "UserCreatedResponse",
    "UserResponse",
    "UserUpdateRequest",
    "UserUpdatedResponse",
]
