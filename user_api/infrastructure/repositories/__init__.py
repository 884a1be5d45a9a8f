"""Repository implementations: SQLAlchemy-backed and placeholder."""

from user_api.infrastructure.repositories.placeholder_repository import (
    PlaceholderUnitOfWork,
    PlaceholderUserRepository,
)
from user_api.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from user_api.infrastructure.repositories.user_repository_impl import UserRepository

__all__ = [
    "PlaceholderUnitOfWork",
    "PlaceholderUserRepository",
    "UserRepository",
    "UnitOfWork",
]
