"""Unit tests for the placeholder user store."""

import pytest

from user_api.domain.entities.user import User
from user_api.infrastructure.repositories.placeholder_repository import (
    PlaceholderUnitOfWork,
    PlaceholderUserRepository,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def repo() -> PlaceholderUserRepository:
    return PlaceholderUserRepository()


@pytest.mark.asyncio
async def test_find_by_id_returns_fresh_default_user(repo):
    first = await repo.find_by_id(1)
    second = await repo.find_by_id(1)

    assert first == User()
    assert first is not second


@pytest.mark.asyncio
async def test_find_all_is_always_empty(repo):
    assert await repo.find_all() == []
    assert await repo.find_all(search="x", limit=100) == []


@pytest.mark.asyncio
async def test_create_and_update_ignore_entity(repo):
    entity = User(id=5, name="Alice", email="alice@example.com")

    assert await repo.create(entity) == User()
    assert await repo.update(5, entity) == User()


@pytest.mark.asyncio
async def test_delete_always_succeeds(repo):
    assert await repo.delete(123) is True


@pytest.mark.asyncio
async def test_find_by_email_never_matches(repo):
    assert await repo.find_by_email("alice@example.com") is None


@pytest.mark.asyncio
async def test_unit_of_work_context():
    async with PlaceholderUnitOfWork() as uow:
        assert isinstance(uow.users, PlaceholderUserRepository)
        await uow.commit()
        await uow.rollback()
