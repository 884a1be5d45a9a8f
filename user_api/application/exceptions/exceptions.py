"""Application layer exceptions.

Each class carries the ``error_code`` the presentation layer maps to an
HTTP status: not found (404), invalid input (400), conflict (409).
"""


class ApplicationError(Exception):
    """Base application layer exception."""

    error_code: str

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UserNotFoundError(ApplicationError):
    """No user has the requested id."""

    error_code = "USER_NOT_FOUND"


class InvalidInputError(ApplicationError):
    """A payload value or query parameter the store cannot use."""

    error_code = "INVALID_INPUT"


class UserAlreadyExistsError(ApplicationError):
    """The email is already registered to another user."""

    error_code = "USER_ALREADY_EXISTS"
