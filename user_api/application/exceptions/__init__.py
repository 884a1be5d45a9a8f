"""Application layer exceptions."""

from user_api.application.exceptions.exceptions import (
    ApplicationError,
    InvalidInputError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

__all__ = [
    "ApplicationError",
    "InvalidInputError",
    "UserNotFoundError",
    "UserAlreadyExistsError",
]
