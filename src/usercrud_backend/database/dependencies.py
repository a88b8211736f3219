"""FastAPI dependencies for database access."""

from fastapi import Request

from usercrud_backend.database.repositories import UserRepository


def get_user_repository(request: Request) -> UserRepository:
    """Return the repository the application was constructed with."""
    return request.app.state.user_repository
