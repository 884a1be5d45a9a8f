"""Unit of Work over one SQLAlchemy session per ``async with`` block."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from user_api.domain.repositories.unit_of_work import IUnitOfWork
from user_api.infrastructure.repositories.user_repository_impl import UserRepository


class UnitOfWork(IUnitOfWork):
    """
    Binds a UserRepository to a fresh session on entry.

    Work not committed by the end of the block is discarded: rolled back when
    the block raised, dropped with the session otherwise.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    def _active_session(self, action: str) -> AsyncSession:
        if self._session is None:
            raise RuntimeError(f"Cannot {action} outside an 'async with' block")
        return self._session

    async def __aenter__(self) -> "UnitOfWork":
        self._session = self._session_factory()
        self.users = UserRepository(self._session)
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        session, self._session = self._session, None
        if session is None:
            return
        try:
            if exc_type is not None:
                await session.rollback()
        finally:
            await session.close()

    async def commit(self) -> None:
        await self._active_session("commit").commit()

    async def rollback(self) -> None:
        await self._active_session("roll back").rollback()
