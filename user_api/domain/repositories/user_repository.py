"""User repository interface."""

from abc import abstractmethod

from user_api.domain.entities.user import User
from user_api.domain.repositories.base import IRepository


class IUserRepository(IRepository[User]):
    """
    User-specific repository interface.

    Extends the base CRUD contract with the email lookup needed to keep
    addresses unique.
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None:
        """
        Find a user by their email address.

        Returns:
            User if found, None otherwise
        """
        pass
