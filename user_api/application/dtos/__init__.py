"""Data Transfer Objects for application layer."""

from user_api.application.dtos.user_dto import (
    DEFAULT_LIST_LIMIT,
    UserDTO,
    UserFields,
    UserListQuery,
    UserResponse,
)

__all__ = ["DEFAULT_LIST_LIMIT", "UserDTO", "UserFields", "UserListQuery", "UserResponse"]
