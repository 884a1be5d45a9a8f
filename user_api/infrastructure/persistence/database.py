"""Engine, session factory and schema setup for the database user store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from user_api.infrastructure.config.settings import Settings


class Base(DeclarativeBase):
    pass


def create_database_engine(settings: Settings) -> AsyncEngine:
    """Pooled asyncpg engine for ``settings.database_url``."""
    return create_async_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Entities are built from refreshed rows, so nothing needs expiring on commit
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


async def create_tables(engine: AsyncEngine) -> None:
    """Create the ``users`` table (and any other mapped table) when missing."""
    from user_api.infrastructure.persistence.models import user_model  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
