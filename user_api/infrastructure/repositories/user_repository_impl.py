"""User repository implementation using SQLAlchemy."""

from datetime import datetime, timezone
from typing import Optional, List

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.domain.entities.user import User
from user_api.domain.repositories.user_repository import IUserRepository
from user_api.infrastructure.persistence.models.user_model import UserModel


class UserRepository(IUserRepository):
    """
    SQLAlchemy implementation of IUserRepository.

    Returns domain entities, never exposing ORM models to the application
    layer. The session is owned by the unit of work.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _get_model(self, id: int) -> Optional[UserModel]:
        result = await self._session.execute(
            select(UserModel).where(UserModel.id == id)
        )
        return result.scalar_one_or_none()

    async def find_by_id(self, id: int) -> Optional[User]:
        """Get user by ID."""
        user_model = await self._get_model(id)

        if user_model is None:
            return None

        return user_model.to_entity()

    async def find_all(self, search: Optional[str] = None, limit: int = 10) -> List[User]:
        """List users ordered by id, filtered by a case-insensitive substring."""
        query = select(UserModel).order_by(UserModel.id).limit(limit)

        if search:
            query = query.where(
                or_(
                    UserModel.name.icontains(search, autoescape=True),
                    UserModel.email.icontains(search, autoescape=True),
                )
            )

        result = await self._session.execute(query)
        return [model.to_entity() for model in result.scalars().all()]

    async def create(self, entity: User) -> User:
        """
        Add a new user.

        Flushes to obtain the generated id, then refreshes so the
        server-side timestamps are loaded.
        """
        user_model = UserModel.from_entity(entity)

        self._session.add(user_model)
        await self._session.flush()
        await self._session.refresh(user_model)

        return user_model.to_entity()

    async def update(self, id: int, entity: User) -> Optional[User]:
        """Copy name and email onto the stored row and refresh updated_at."""
        user_model = await self._get_model(id)

        if user_model is None:
            return None

        user_model.name = entity.name
        user_model.email = entity.email
        # Stamped on every update, including ones that change no field
        user_model.updated_at = datetime.now(timezone.utc)

        await self._session.flush()
        await self._session.refresh(user_model)

        return user_model.to_entity()

    async def delete(self, id: int) -> bool:
        """Delete user by ID."""
        user_model = await self._get_model(id)

        if user_model is None:
            return False

        await self._session.delete(user_model)
        await self._session.flush()

        return True

    async def find_by_email(self, email: str) -> Optional[User]:
        """Get user by email address."""
        result = await self._session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return user_model.to_entity()
