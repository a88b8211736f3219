"""CRUD endpoints for the user resource."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from usercrud_backend.api.dependencies import get_user_service
from usercrud_backend.api.models import (
    MessageResponse,
    UserCreatedResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdatedResponse,
    UserUpdateRequest,
)
from usercrud_backend.api.services import UserNotFoundError, UserService
from usercrud_backend.database import StoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["User"])

USER_NOT_FOUND = "User not found"

_bad_request = {status.HTTP_400_BAD_REQUEST: {"model": MessageResponse, "description": "Bad request"}}
_not_found = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse, "description": USER_NOT_FOUND}}
_server_error = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse, "description": "Server error"}
}


def _fail(status_code: int, exc: StoreError) -> HTTPException:
    logger.error("User store failure (%s): %s", status_code, exc.message)
    return HTTPException(status_code=status_code, detail=exc.message)


def _not_found_error(user_id: str) -> HTTPException:
    logger.info("User %s not found", user_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)


@router.get(
    "",
    response_model=list[UserResponse],
    summary="Retrieves all users",
    responses=_server_error,
)
def list_users(
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """Return every user in store order."""

    try:
        users = service.list_users()
    except StoreError as exc:
        raise _fail(status.HTTP_500_INTERNAL_SERVER_ERROR, exc) from exc

    logger.info("Listed %d users", len(users))
    return [UserResponse.model_validate(user) for user in users]


@router.post(
    "",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Adds a new user",
    responses=_bad_request,
)
def create_user(
    payload: UserCreateRequest,
    service: UserService = Depends(get_user_service),
) -> UserCreatedResponse:
    """Create a user; the store assigns its id."""

    try:
        user = service.create_user(
            name=payload.name, email=payload.email, password=payload.password
        )
    except StoreError as exc:
        raise _fail(status.HTTP_400_BAD_REQUEST, exc) from exc

    logger.info("Created user %s", user.id)
    return UserCreatedResponse(
        message="User added successfully", user=UserResponse.model_validate(user)
    )


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get a user by ID",
    responses={**_not_found, **_server_error},
)
def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = service.get_user(user_id)
    except UserNotFoundError as exc:
        raise _not_found_error(user_id) from exc
    except StoreError as exc:
        raise _fail(status.HTTP_500_INTERNAL_SERVER_ERROR, exc) from exc

    return UserResponse.model_validate(user)


@router.put(
    "/{user_id}",
    response_model=UserUpdatedResponse,
    summary="Update a user by ID",
    responses={**_bad_request, **_not_found},
)
def update_user(
    user_id: str,
    payload: UserUpdateRequest | None = None,
    service: UserService = Depends(get_user_service),
) -> UserUpdatedResponse:
    """Update the supplied fields of a user; empty values are ignored.

    A request without a body is an empty partial update.
    """

    payload = payload or UserUpdateRequest()
    try:
        user = service.update_user(
            user_id, name=payload.name, email=payload.email, password=payload.password
        )
    except UserNotFoundError as exc:
        raise _not_found_error(user_id) from exc
    except StoreError as exc:
        raise _fail(status.HTTP_400_BAD_REQUEST, exc) from exc

    logger.info("Updated user %s", user_id)
    return UserUpdatedResponse(
        message="User updated successfully", user=UserResponse.model_validate(user)
    )


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Delete a user by ID",
    responses={**_not_found, **_server_error},
)
def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    try:
        service.delete_user(user_id)
    except UserNotFoundError as exc:
        raise _not_found_error(user_id) from exc
    except StoreError as exc:
        raise _fail(status.HTTP_500_INTERNAL_SERVER_ERROR, exc) from exc

    logger.info("Deleted user %s", user_id)
    return MessageResponse(message="User deleted successfully")
