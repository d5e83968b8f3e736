"""HTTP routes for the sample user collection.

The handlers delegate to the ``UserDirectory`` and translate its ``KeyError``
and ``ValueError`` into HTTP errors; the application-level handlers in
``api.main`` render those as ``{"error": ...}`` bodies.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException

from api.models.schemas import (
    ErrorResponse,
    UserCreatedResponse,
    UserCreateRequest,
    UserListResponse,
    UserResponse,
)
from api.services.user_directory import parse_user_id, user_directory

router = APIRouter(prefix="/api", tags=["users"])

USER_NOT_FOUND = "User not found"
USER_CREATED = "User created successfully"


@router.get("/users", response_model=UserListResponse)
@router.get("/users/", response_model=UserListResponse, include_in_schema=False)
def list_users() -> UserListResponse:
    """Return every seed user in insertion order."""

    return UserListResponse(users=list(user_directory.list_users()))


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
)
@router.get("/users/{user_id}/", response_model=UserResponse, include_in_schema=False)
def get_user(user_id: str) -> UserResponse:
    """Return a single user by numeric id."""

    parsed = parse_user_id(user_id)
    if parsed is None:
        raise HTTPException(status_code=404, detail=USER_NOT_FOUND)
    try:
        return UserResponse(user=user_directory.get_user(parsed))
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=USER_NOT_FOUND) from exc


@router.post(
    "/users",
    response_model=UserCreatedResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
@router.post("/users/", response_model=UserCreatedResponse, status_code=201, include_in_schema=False)
def create_user(request: Optional[UserCreateRequest] = None) -> UserCreatedResponse:
    """Validate the payload and echo back a freshly identified user."""

    try:
        user = user_directory.create_user(request or UserCreateRequest())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return UserCreatedResponse(user=user, message=USER_CREATED)
