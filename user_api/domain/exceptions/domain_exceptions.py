"""Domain layer exceptions for User invariants."""


class DomainException(Exception):
    """Base for values the domain refuses to hold. Reported as invalid input."""

    error_code = "INVALID_INPUT"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidUserError(DomainException):
    """Raised when a User would get a blank name or an address without '@'."""
