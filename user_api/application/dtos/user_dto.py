"""User DTOs for application layer using Pydantic."""

from datetime import datetime
from typing import Annotated, Any, Optional
from pydantic import BaseModel, EmailStr, ConfigDict, Field, BeforeValidator, ValidationError

from user_api.application.exceptions import InvalidInputError
from user_api.domain.entities.user import User

DEFAULT_LIST_LIMIT = 10

# Path ids are 64-bit (BIGINT range); the list limit is a 32-bit integer.
USER_ID_MIN = -(2**63)
USER_ID_MAX = 2**63 - 1
LIMIT_MIN = -(2**31)
LIMIT_MAX = 2**31 - 1


def strip_whitespace(v: str | None) -> str | None:
    return v.strip() if isinstance(v, str) else v


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )


class UserFields(BaseModel):
    """User attributes after checking: trimmed non-blank name, well-formed email."""

    name: Annotated[str, BeforeValidator(strip_whitespace), Field(min_length=1)] | None = None
    email: Optional[EmailStr] = None

    def to_entity(self) -> User:
        return User(name=self.name, email=self.email)


class UserDTO(BaseModel):
    """
    Request body for creating or updating a user.

    Binding accepts any JSON object: both fields are optional and untyped,
    unknown keys are dropped. A store that keeps the values calls
    ``validated()`` first.
    """

    name: Any = None
    email: Any = None

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "email": "user@example.com",
            }
        },
    )

    def validated(self) -> UserFields:
        """
        Check the payload values.

        Raises:
            InvalidInputError: If name is not a non-blank string or email is malformed
        """
        try:
            return UserFields.model_validate(self.model_dump())
        except ValidationError as exc:
            raise InvalidInputError(_describe(exc)) from exc


class UserListQuery(BaseModel):
    """
    Query parameters for listing users, with their defaults.

    - search: Optional free-text filter on name or email
    - limit: Maximum number of users returned, defaults to DEFAULT_LIST_LIMIT
    """

    search: Optional[str] = None
    limit: int = Field(default=DEFAULT_LIST_LIMIT, ge=LIMIT_MIN, le=LIMIT_MAX)

    model_config = ConfigDict(extra="ignore")


class UserResponse(BaseModel):
    """DTO for returning user data to presentation layer."""

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        """Placeholder users convert too; their fields serialise as JSON null."""
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
