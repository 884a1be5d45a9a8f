"""User ORM model - infrastructure layer SQLAlchemy mapping."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from user_api.domain.entities.user import User
from user_api.infrastructure.persistence.database import Base


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops tzinfo on round trip; treat naive values as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class UserModel(Base):
    """
    SQLAlchemy ORM model for users table.

    Name and email are nullable because a User may be created from an
    empty payload. Email is unique when present.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        insert_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        insert_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"UserModel(id={self.id!r}, email={self.email!r}, name={self.name!r})"

    def to_entity(self) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=self.id,
            name=self.name,
            email=self.email,
            created_at=_as_utc(self.created_at),
            updated_at=_as_utc(self.updated_at),
        )

    @staticmethod
    def from_entity(user: User) -> "UserModel":
        """Create ORM model from domain entity, ready for insert."""
        model = UserModel(name=user.name, email=user.email)

        if user.id is not None:
            model.id = user.id

        if user.created_at is not None:
            model.created_at = user.created_at
        if user.updated_at is not None:
            model.updated_at = user.updated_at

        return model
