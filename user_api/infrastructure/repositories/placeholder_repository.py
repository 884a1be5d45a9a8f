"""Placeholder user store.

Backs the users endpoints without any storage: every lookup yields a
default-constructed User, listing yields nothing, and inputs are ignored.
Selected with ``USER_STORE=placeholder`` (the default).

Dependency flow:
    UserService (application) -> IUnitOfWork (domain) <- PlaceholderUnitOfWork (infrastructure)
"""

from typing import Any, List, Optional

from user_api.domain.entities.user import User
from user_api.domain.repositories.unit_of_work import IUnitOfWork
from user_api.domain.repositories.user_repository import IUserRepository


class PlaceholderUserRepository(IUserRepository):
    """
    Stateless repository that never fails and never remembers.

    - find_by_id / create / update: a fresh ``User()``
    - find_all: an empty list, whatever the search or limit
    - delete: always reports success
    - find_by_email: never finds a user, so no conflicts arise
    """

    async def find_by_id(self, id: int) -> Optional[User]:
        return User()

    async def find_all(self, search: Optional[str] = None, limit: int = 10) -> List[User]:
        return []

    async def create(self, entity: User) -> User:
        return User()

    async def update(self, id: int, entity: User) -> Optional[User]:
        return User()

    async def delete(self, id: int) -> bool:
        return True

    async def find_by_email(self, email: str) -> Optional[User]:
        return None


class PlaceholderUnitOfWork(IUnitOfWork):
    """Unit of Work with nothing to commit or roll back."""

    def __init__(self) -> None:
        self.users = PlaceholderUserRepository()

    async def __aenter__(self) -> "PlaceholderUnitOfWork":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        pass

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass
