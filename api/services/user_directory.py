"""Read-only user directory backing the ``/api/users`` routes.

The seed users live in an immutable tuple built once at import. Created users
are synthesized for the response only and never written back, so handlers can
share the directory across concurrent requests without locking.
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Tuple

from api.models.schemas import REQUIRED_FIELDS_MESSAGE, User, UserCreateRequest
from api.services.clock import epoch_millis

SEED_USERS: Tuple[User, ...] = (
    User(id=1, name="John Doe", email="john@example.com"),
    User(id=2, name="Jane Smith", email="jane@example.com"),
    User(id=3, name="Bob Johnson", email="bob@example.com"),
)

_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


class UserDirectory:
    """Lookup and creation over a fixed set of users."""

    def __init__(
        self,
        users: Tuple[User, ...] = SEED_USERS,
        id_factory: Callable[[], int] = epoch_millis,
    ) -> None:
        self._users = tuple(users)
        self._id_factory = id_factory

    def list_users(self) -> Tuple[User, ...]:
        return self._users

    def get_user(self, user_id: int) -> User:
        for user in self._users:
            if user.id == user_id:
                return user
        raise KeyError(f"User {user_id} not found")

    def create_user(self, payload: UserCreateRequest) -> User:
        """Build a new user from ``payload`` without storing it.

        Raises ``ValueError`` when a required field is absent or empty.
        """

        if payload.missing_fields():
            raise ValueError(REQUIRED_FIELDS_MESSAGE)
        return User(id=self._id_factory(), name=payload.name, email=payload.email)


def parse_user_id(value: str) -> Optional[int]:
    """Read the leading integer of a path segment (``"12abc"`` -> 12).

    A ``0x`` prefix reads hexadecimal digits (``"0x2"`` -> 2). Returns ``None``
    when the segment does not start with an integer.
    """

    match = _LEADING_INT.match(value)
    if match is None:
        return None
    sign, hex_digits, digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        number = int(hex_digits, 16)
    else:
        number = int(digits)
    return -number if sign == "-" else number


user_directory = UserDirectory()
