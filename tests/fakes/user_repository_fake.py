"""Fake user repository for testing without a database.

Stores users in a dict and implements the same interface as the SQLAlchemy
repository, including search and limit semantics.
"""

from datetime import UTC, datetime

from user_api.domain.entities.user import User
from user_api.domain.repositories.user_repository import IUserRepository


class FakeUserRepository(IUserRepository):
    """
    In-memory fake implementation of IUserRepository.

    Usage:
        repo = FakeUserRepository()
        created_user = await repo.create(User(name="Test", email="test@example.com"))
    """

    def __init__(self, initial_data: list[User] | None = None):
        """
        Args:
            initial_data: Optional list of users to pre-populate the repository
        """
        self._users: dict[int, User] = {}
        self._next_id = 1

        for user in initial_data or []:
            if user.id is None:
                self._store_new(user)
            else:
                self._users[user.id] = user
                self._next_id = max(self._next_id, user.id + 1)

    def _store_new(self, entity: User) -> User:
        now = datetime.now(UTC)
        new_user = User(
            id=self._next_id,
            name=entity.name,
            email=entity.email,
            created_at=entity.created_at or now,
            updated_at=entity.updated_at or now,
        )
        self._users[new_user.id] = new_user
        self._next_id += 1
        return new_user

    async def find_by_id(self, id: int) -> User | None:
        return self._users.get(id)

    async def find_all(self, search: str | None = None, limit: int = 10) -> list[User]:
        """Case-insensitive substring match on name or email, ordered by id."""
        users = [self._users[key] for key in sorted(self._users)]

        if search:
            needle = search.lower()
            users = [
                user
                for user in users
                if needle in (user.name or "").lower() or needle in (user.email or "").lower()
            ]

        return users[:limit]

    async def create(self, entity: User) -> User:
        return self._store_new(entity)

    async def update(self, id: int, entity: User) -> User | None:
        existing = self._users.get(id)
        if existing is None:
            return None

        updated_user = User(
            id=id,
            name=entity.name,
            email=entity.email,
            created_at=existing.created_at,
            updated_at=datetime.now(UTC),
        )
        self._users[id] = updated_user
        return updated_user

    async def delete(self, id: int) -> bool:
        if id in self._users:
            del self._users[id]
            return True
        return False

    async def find_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    # Helper methods for testing

    def clear(self) -> None:
        """Clear all data (useful for test teardown)."""
        self._users.clear()
        self._next_id = 1

    def count(self) -> int:
        """Get total number of users (useful for assertions)."""
        return len(self._users)
