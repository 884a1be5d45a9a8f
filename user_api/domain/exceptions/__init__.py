"""Domain exceptions - User invariant violations."""

from user_api.domain.exceptions.domain_exceptions import DomainException, InvalidUserError

__all__ = ["DomainException", "InvalidUserError"]
