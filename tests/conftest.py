"""Pytest configuration and fixtures.

Shared fixtures for unit tests. Services are built over in-memory fakes,
so tests run without a database and each test gets fresh state.
"""

from datetime import UTC, datetime

import pytest

from user_api.application.services.user_service import UserService
from user_api.domain.entities.user import User
from tests.fakes.unit_of_work_fake import FakeUnitOfWork


@pytest.fixture
def sample_user() -> User:
    """Create a sample persisted user for testing."""
    return User(
        id=1,
        name="Test User",
        email="test@example.com",
        created_at=datetime.now(UTC),
        updated_at=datetime.now(UTC),
    )


@pytest.fixture
def another_user() -> User:
    """Create another sample user for testing."""
    return User(
        id=2,
        name="Another User",
        email="another@example.com",
        created_at=datetime.now(UTC),
        updated_at=datetime.now(UTC),
    )


@pytest.fixture
def fake_uow():
    """Provide a fresh, empty FakeUnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def fake_uow_with_users(sample_user, another_user):
    """Provide a FakeUnitOfWork pre-populated with two users."""
    return FakeUnitOfWork(initial_users=[sample_user, another_user])


@pytest.fixture
def user_service(fake_uow):
    """Provide a UserService over an empty fake store."""

    def uow_factory():
        return fake_uow

    return UserService(uow_factory=uow_factory)


@pytest.fixture
def user_service_with_data(fake_uow_with_users):
    """Provide a UserService over a pre-populated fake store."""

    def uow_factory():
        return fake_uow_with_users

    return UserService(uow_factory=uow_factory)
