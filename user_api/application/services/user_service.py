"""User service - application layer use cases for the User resource."""

import logging
from collections.abc import Callable
from typing import Optional

from user_api.application.dtos.user_dto import (
    DEFAULT_LIST_LIMIT,
    UserDTO,
    UserFields,
    UserResponse,
)
from user_api.application.exceptions import (
    InvalidInputError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from user_api.domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)


class UserService:
    """
    The five CRUD use cases over a unit of work.

    With ``validate_input`` off (the placeholder store) payloads and the list
    limit are passed through unchecked, because that store ignores them.
    Otherwise bad values raise InvalidInputError before the store is touched.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork], validate_input: bool = True):
        self._uow_factory = uow_factory
        self._validate_input = validate_input

    def _fields(self, dto: UserDTO) -> UserFields:
        return dto.validated() if self._validate_input else UserFields()

    async def get_user(self, user_id: int) -> UserResponse:
        """
        Raises:
            UserNotFoundError: If user doesn't exist
        """
        async with self._uow_factory() as uow:
            user = await uow.users.find_by_id(user_id)

            if user is None:
                logger.warning("User %s not found", user_id)
                raise UserNotFoundError(f"User with ID {user_id} not found")

            return UserResponse.from_entity(user)

    async def list_users(
        self, search: Optional[str] = None, limit: int = DEFAULT_LIST_LIMIT
    ) -> list[UserResponse]:
        """
        List users matching an optional search term, at most ``limit`` of them.

        Raises:
            InvalidInputError: If limit is not positive and input is validated
        """
        if self._validate_input and limit < 1:
            raise InvalidInputError(f"limit must be at least 1, got {limit}")

        async with self._uow_factory() as uow:
            users = await uow.users.find_all(search=search, limit=limit)
            return [UserResponse.from_entity(user) for user in users]

    async def create_user(self, dto: UserDTO) -> UserResponse:
        """
        Raises:
            InvalidInputError: If the payload values are malformed
            UserAlreadyExistsError: If email already exists
        """
        fields = self._fields(dto)

        async with self._uow_factory() as uow:
            if fields.email and await uow.users.find_by_email(fields.email) is not None:
                logger.warning("Rejected create: email %s already registered", fields.email)
                raise UserAlreadyExistsError(f"Email {fields.email} already registered")

            created_user = await uow.users.create(fields.to_entity())
            await uow.commit()

            logger.info("Created user %s", created_user.id)
            return UserResponse.from_entity(created_user)

    async def update_user(self, user_id: int, dto: UserDTO) -> UserResponse:
        """
        Apply the given fields; the ones left out are kept.

        Raises:
            InvalidInputError: If the payload values are malformed
            UserNotFoundError: If user doesn't exist
            UserAlreadyExistsError: If email is taken by another user
        """
        fields = self._fields(dto)

        async with self._uow_factory() as uow:
            user = await uow.users.find_by_id(user_id)
            if user is None:
                logger.warning("User %s not found", user_id)
                raise UserNotFoundError(f"User with ID {user_id} not found")

            if fields.email and fields.email != user.email:
                existing = await uow.users.find_by_email(fields.email)
                if existing is not None and existing.id != user_id:
                    logger.warning("Rejected update of user %s: email %s in use", user_id, fields.email)
                    raise UserAlreadyExistsError(f"Email {fields.email} already in use")

            if fields.name:
                user.change_name(fields.name)
            if fields.email:
                user.change_email(fields.email)

            updated_user = await uow.users.update(user_id, user)
            if updated_user is None:
                raise UserNotFoundError(f"User with ID {user_id} not found")

            await uow.commit()

            logger.info("Updated user %s", user_id)
            return UserResponse.from_entity(updated_user)

    async def delete_user(self, user_id: int) -> None:
        """
        Raises:
            UserNotFoundError: If user doesn't exist
        """
        async with self._uow_factory() as uow:
            deleted = await uow.users.delete(user_id)

            if not deleted:
                logger.warning("User %s not found", user_id)
                raise UserNotFoundError(f"User with ID {user_id} not found")

            await uow.commit()
            logger.info("Deleted user %s", user_id)
