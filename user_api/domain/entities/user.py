"""User domain entity - pure business logic, no infrastructure."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from user_api.domain.exceptions import InvalidUserError


def _check_name(name: Optional[str]) -> None:
    if name is not None and not name.strip():
        raise InvalidUserError("Name cannot be blank")


def _check_email(email: Optional[str]) -> None:
    if email is not None and "@" not in email:
        raise InvalidUserError(f"Invalid email address: '{email}'")


@dataclass
class User:
    """
    The User resource.

    Every attribute is optional: ``User()`` is the placeholder value with no
    identity. Name and email are checked only when present.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        _check_name(self.name)
        _check_email(self.email)

    def change_name(self, new_name: str) -> None:
        """
        Rename the user and stamp ``updated_at``.

        Raises:
            InvalidUserError: If the new name is blank
        """
        _check_name(new_name)
        self.name = new_name
        self.updated_at = datetime.now(timezone.utc)

    def change_email(self, new_email: str) -> None:
        """
        Move the user to a new address and stamp ``updated_at``.

        Raises:
            InvalidUserError: If the address has no '@'
        """
        _check_email(new_email)
        self.email = new_email
        self.updated_at = datetime.now(timezone.utc)
