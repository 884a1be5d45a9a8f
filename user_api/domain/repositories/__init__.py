"""Repository interfaces - define contracts for data access."""

from user_api.domain.repositories.base import IRepository
from user_api.domain.repositories.unit_of_work import IUnitOfWork
from user_api.domain.repositories.user_repository import IUserRepository

__all__ = ["IRepository", "IUserRepository", "IUnitOfWork"]
