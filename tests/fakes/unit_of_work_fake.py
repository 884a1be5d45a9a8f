"""Fake Unit of Work recording how each block ended."""

from user_api.domain.entities.user import User
from user_api.domain.repositories.unit_of_work import IUnitOfWork
from tests.fakes.user_repository_fake import FakeUserRepository


class FakeUnitOfWork(IUnitOfWork):
    """
    Shares one FakeUserRepository across every block.

    Writes land immediately; ``outcome`` records whether the last block
    committed, rolled back, or did neither (``None``).
    """

    def __init__(self, initial_users: list[User] | None = None):
        self.users = FakeUserRepository(initial_data=initial_users)
        self.outcome: str | None = None
        self._open = False

    async def __aenter__(self) -> "FakeUnitOfWork":
        self._open = True
        self.outcome = None
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None:
            await self.rollback()
        self._open = False

    async def commit(self) -> None:
        assert self._open, "commit outside 'async with'"
        self.outcome = "committed"

    async def rollback(self) -> None:
        assert self._open, "rollback outside 'async with'"
        self.outcome = "rolled back"
