"""Integration test fixtures.

Two FastAPI test clients drive the real application:
- ``client``: placeholder user store, no database at all
- ``db_client``: database user store on SQLite in-memory
"""

from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from user_api.infrastructure.config.settings import Settings, get_settings
from user_api.infrastructure.persistence.database import Base
from user_api.infrastructure.persistence.models.user_model import UserModel  # noqa: F401
from user_api.main import app
from user_api.presentation.dependencies import get_session_factory

# Test database URL (SQLite in-memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine using SQLite in-memory."""
    # StaticPool keeps one connection so every session sees the same database
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine: AsyncEngine):
    """Create a test session factory."""
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
def client() -> Generator[TestClient]:
    """Test client with the placeholder user store."""
    app.dependency_overrides[get_settings] = lambda: Settings(
        user_store="placeholder", environment="test"
    )

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def db_client(test_session_factory) -> Generator[TestClient]:
    """Test client with the database user store on SQLite in-memory."""
    app.dependency_overrides[get_settings] = lambda: Settings(
        user_store="database", environment="test"
    )
    app.dependency_overrides[get_session_factory] = lambda: test_session_factory

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
