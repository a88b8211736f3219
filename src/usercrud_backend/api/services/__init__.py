"""Service layer for API-specific business logic."""

from usercrud_backend.api.services.users import UserNotFoundError, UserService

__all__ = ["UserNotFoundError", "UserService"]
