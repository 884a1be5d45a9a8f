"""Unit of Work interface - domain layer."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from user_api.domain.repositories.user_repository import IUserRepository


class IUnitOfWork(ABC):
    """
    Unit of Work interface for managing transactions.

    The UoW is the transactional boundary the application layer opens for
    each use case. Repositories are only available inside ``async with``.
    """

    users: "IUserRepository"

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        """Start a transaction and bind repositories to it."""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit async context manager.

        Rolls back if the block raised; uncommitted work is discarded.
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit the current transaction."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Rollback the current transaction."""
        pass
