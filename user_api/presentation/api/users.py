"""User API endpoints.

Routes are declared in USER_ROUTES and registered on the router
explicitly, one entry per (method, path).
"""

from typing import Annotated, Any, Callable, NamedTuple, Optional

from fastapi import APIRouter, Depends, Path, Query, status

from user_api.application.dtos.user_dto import (
    USER_ID_MAX,
    USER_ID_MIN,
    UserDTO,
    UserListQuery,
    UserResponse,
)
from user_api.application.services.user_service import UserService
from user_api.presentation.dependencies import get_user_service
from user_api.presentation.error_schemas import ErrorResponse

UserId = Annotated[int, Path(ge=USER_ID_MIN, le=USER_ID_MAX)]


async def get_user(
    user_id: UserId,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Get user by ID."""
    return await service.get_user(user_id)


async def list_users(
    query: Annotated[UserListQuery, Query()],
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """List users, applying the search filter and limit defaults."""
    return await service.list_users(search=query.search, limit=query.limit)


async def create_user(
    dto: UserDTO,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create user."""
    return await service.create_user(dto)


async def update_user(
    user_id: UserId,
    dto: UserDTO,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update user."""
    return await service.update_user(user_id, dto)


async def delete_user(
    user_id: UserId,
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete user."""
    await service.delete_user(user_id)


class Route(NamedTuple):
    method: str
    path: str
    endpoint: Callable[..., Any]
    status_code: int
    response_model: Optional[Any]
    summary: str
    responses: dict[int | str, dict[str, Any]]


_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_CONFLICT = {status.HTTP_409_CONFLICT: {"model": ErrorResponse}}

USER_ROUTES: tuple[Route, ...] = (
    Route("GET", "/{user_id}", get_user, status.HTTP_200_OK, UserResponse,
          "Get user by ID", _NOT_FOUND),
    Route("GET", "", list_users, status.HTTP_200_OK, list[UserResponse],
          "List users", {}),
    Route("POST", "", create_user, status.HTTP_200_OK, UserResponse,
          "Create a new user", _CONFLICT),
    Route("PUT", "/{user_id}", update_user, status.HTTP_200_OK, UserResponse,
          "Update user", {**_NOT_FOUND, **_CONFLICT}),
    Route("DELETE", "/{user_id}", delete_user, status.HTTP_204_NO_CONTENT, None,
          "Delete user", _NOT_FOUND),
)


def register_routes(router: APIRouter, routes: tuple[Route, ...]) -> APIRouter:
    """Add every route in the table to the router."""
    for route in routes:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            status_code=route.status_code,
            response_model=route.response_model,
            summary=route.summary,
            responses=route.responses,
        )
    return router


router = register_routes(APIRouter(prefix="/users", tags=["users"]), USER_ROUTES)
