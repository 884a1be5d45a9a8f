"""FastAPI dependency injection setup.

This module is the COMPOSITION ROOT - where concrete implementations are
chosen and injected into the application layer's abstractions.

The one decision made here is which user store backs the endpoints:
- USER_STORE=placeholder -> PlaceholderUnitOfWork, no database touched
- USER_STORE=database    -> SQLAlchemy UnitOfWork over the configured engine
"""

from collections.abc import Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncEngine

from user_api.domain.repositories.unit_of_work import IUnitOfWork
from user_api.infrastructure.repositories.placeholder_repository import PlaceholderUnitOfWork
from user_api.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from user_api.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
)
from user_api.infrastructure.config.settings import Settings, get_settings
from user_api.application.services.user_service import UserService


# Module-level singletons (created once, reused throughout app lifecycle)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker | None = None


def get_database_engine(settings: Settings) -> AsyncEngine:
    """Get or create database engine singleton."""
    global _engine
    if _engine is None:
        _engine = create_database_engine(settings)
    return _engine


async def dispose_database_engine() -> None:
    """Dispose the engine singleton, if one was created."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


def get_session_factory(
    settings: Settings = Depends(get_settings),
) -> async_sessionmaker | None:
    """Get or create session factory singleton.

    Returns None when the placeholder store is configured, so that no
    engine (and no database driver) is created for it.

    Note:
        In tests, override this dependency with a SQLite session factory:

        app.dependency_overrides[get_session_factory] = lambda: test_session_factory
    """
    if not settings.uses_database:
        return None

    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(get_database_engine(settings))
    return _session_factory


def get_uow_factory(
    settings: Settings = Depends(get_settings),
    session_factory: async_sessionmaker | None = Depends(get_session_factory),
) -> Callable[[], IUnitOfWork]:
    """
    Dependency that provides a factory of Unit of Work instances.

    Dependency chain:
        get_settings() -> get_session_factory() -> get_uow_factory()
    """
    if not settings.uses_database or session_factory is None:
        return PlaceholderUnitOfWork

    def uow_factory() -> IUnitOfWork:
        return UnitOfWork(session_factory)

    return uow_factory


def get_user_service(
    settings: Settings = Depends(get_settings),
    uow_factory: Callable[[], IUnitOfWork] = Depends(get_uow_factory),
) -> UserService:
    """
    Dependency that provides UserService.

    Input is validated only for the database store; the placeholder store
    ignores payloads and list parameters.
    """
    return UserService(uow_factory=uow_factory, validate_input=settings.uses_database)
