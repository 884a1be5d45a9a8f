"""Fake implementations for testing."""

from tests.fakes.unit_of_work_fake import FakeUnitOfWork
from tests.fakes.user_repository_fake import FakeUserRepository

__all__ = ["FakeUserRepository", "FakeUnitOfWork"]
