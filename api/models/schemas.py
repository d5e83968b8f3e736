"""Pydantic data models used by the FastAPI layer.

Every JSON body the API reads or writes has a model here. The user creation
payload keeps both fields optional so that presence can be checked against
``REQUIRED_USER_FIELDS`` and reported with a single error message.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

REQUIRED_USER_FIELDS = ("name", "email")
REQUIRED_FIELDS_MESSAGE = "Name and email are required"


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str


class UserCreateRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None

    def missing_fields(self) -> List[str]:
        """Required fields that are absent or empty."""

        return [field for field in REQUIRED_USER_FIELDS if not getattr(self, field)]


class WelcomeResponse(BaseModel):
    message: str
    version: str
    timestamp: str


class HealthResponse(BaseModel):
    status: str
    uptime: float
    timestamp: str


class UserListResponse(BaseModel):
    users: List[User]


class UserResponse(BaseModel):
    user: User


class UserCreatedResponse(BaseModel):
    user: User
    message: str


class ErrorResponse(BaseModel):
    error: str


__all__ = [
    "REQUIRED_USER_FIELDS",
    "REQUIRED_FIELDS_MESSAGE",
    "User",
    "UserCreateRequest",
    "WelcomeResponse",
    "HealthResponse",
    "UserListResponse",
    "UserResponse",
    "UserCreatedResponse",
    "ErrorResponse",
]
