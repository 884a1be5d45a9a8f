"""Base repository interfaces following Clean Architecture."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List

# Generic type for domain entities
T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """
    Base repository interface for a resource addressed by an integer id.

    Type Parameters:
        T: The domain entity type this repository manages
    """

    @abstractmethod
    async def find_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve an entity by its ID.

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, search: Optional[str] = None, limit: int = 10) -> List[T]:
        """
        Retrieve entities, optionally filtered by a search term.

        Args:
            search: Free-text filter, None for no filtering
            limit: Maximum number of records to return

        Returns:
            List of entities
        """
        pass

    @abstractmethod
    async def create(self, entity: T) -> T:
        """
        Persist a new entity.

        Returns:
            The stored entity with generated fields (id, timestamps)
        """
        pass

    @abstractmethod
    async def update(self, id: int, entity: T) -> Optional[T]:
        """
        Overwrite the stored entity with the given id.

        Returns:
            The updated entity, None if no entity has that id
        """
        pass

    @abstractmethod
    async def delete(self, id: int) -> bool:
        """
        Delete an entity by ID.

        Returns:
            True if deleted, False if not found
        """
        pass
