"""User repository (SQLAlchemy ORM). Interface methods return domain UserEntity."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities.user import UserEntity
from app.domain.exceptions import NotFoundException
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import (
    BaseRepository,
    translate_db_errors,
)
from app.shared.utils.datetime import ensure_utc


def _user_to_entity(u: User) -> UserEntity:
    """Map ORM User to domain UserEntity."""
    return UserEntity(
        id=u.id,
        name=u.name,
        email=u.email,
        password=u.password,
        created_at=ensure_utc(u.created_at),
        updated_at=ensure_utc(u.updated_at),
    )


def _not_found(user_id: int | None = None, email: str | None = None) -> NotFoundException:
    details: dict[str, object] = {"resource_type": "user"}
    if user_id is not None:
        details["resource_id"] = user_id
    if email is not None:
        details["email"] = email
    return NotFoundException(details=details)


class UserRepository(BaseRepository[User]):
    """ORM-backed IUserRepository: each method issues one ORM statement."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_id(self, user_id: int) -> UserEntity:
        with translate_db_errors("getting user by id"):
            user = await super().get_by_id(user_id)
        if user is None:
            raise _not_found(user_id=user_id)
        return _user_to_entity(user)

    async def get_by_email(self, email: str) -> UserEntity:
        with translate_db_errors("getting user by email"):
            result = await self.db.execute(select(User).where(User.email == email))
            user = result.scalar_one_or_none()
        if user is None:
            raise _not_found(email=email)
        return _user_to_entity(user)

    async def create(self, user: UserEntity) -> UserEntity:
        """Insert user; ConflictException on the unique email constraint."""
        row = User(
            name=user.name,
            email=user.email,
            password=user.password,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        with translate_db_errors("creating user"):
            created = await super().create(row)
        return _user_to_entity(created)

    async def update(self, user: UserEntity) -> UserEntity:
        """Write all mutable columns; NotFoundException when no row has this id."""
        if user.id is None:
            raise _not_found()
        with translate_db_errors("updating user"):
            matched = await self.update_by_id(
                user.id,
                {
                    "name": user.name,
                    "email": user.email,
                    "password": user.password,
                    "updated_at": user.updated_at,
                },
            )
        if matched == 0:
            raise _not_found(user_id=user.id)
        return user

    async def delete(self, user_id: int) -> None:
        with translate_db_errors("deleting user"):
            removed = await self.delete_by_id(user_id)
        if removed == 0:
            raise _not_found(user_id=user_id)

    async def list(self, limit: int, offset: int) -> list[UserEntity]:
        with translate_db_errors("listing users"):
            users = await self.get_all(skip=offset, limit=limit)
        return [_user_to_entity(u) for u in users]
