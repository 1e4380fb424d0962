"""User repository (raw SQL). Same contract as UserRepository, written as parameterized SQL text.

Statements use only portable SQL (no RETURNING) so they run on SQLite and
MySQL alike; the generated id is read from the cursor's lastrowid.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import DateTime, Integer, String, bindparam, text
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities.user import UserEntity
from app.domain.exceptions import NotFoundException
from app.infrastructure.persistence.repositories.base import translate_db_errors
from app.shared.utils.datetime import ensure_utc

_SELECT_USER = "SELECT id, name, email, password, created_at, updated_at FROM users"

# Result column types so the dialect converts DATETIME text/values to datetime.
_RESULT_TYPES = {
    "id": Integer(),
    "name": String(),
    "email": String(),
    "password": String(),
    "created_at": DateTime(timezone=True),
    "updated_at": DateTime(timezone=True),
}

_GET_BY_ID = text(f"{_SELECT_USER} WHERE id = :id").columns(**_RESULT_TYPES)
_GET_BY_EMAIL = text(f"{_SELECT_USER} WHERE email = :email").columns(**_RESULT_TYPES)
_LIST = text(f"{_SELECT_USER} ORDER BY id LIMIT :limit OFFSET :offset").columns(
    **_RESULT_TYPES
)
_INSERT = text(
    "INSERT INTO users (name, email, password, created_at, updated_at) "
    "VALUES (:name, :email, :password, :created_at, :updated_at)"
).bindparams(
    bindparam("created_at", type_=DateTime(timezone=True)),
    bindparam("updated_at", type_=DateTime(timezone=True)),
)
_UPDATE = text(
    "UPDATE users SET name = :name, email = :email, password = :password, "
    "updated_at = :updated_at WHERE id = :id"
).bindparams(bindparam("updated_at", type_=DateTime(timezone=True)))
_DELETE = text("DELETE FROM users WHERE id = :id")


def _row_to_entity(row: Any) -> UserEntity:
    """Map a result mapping (column name -> value) to UserEntity."""
    return UserEntity(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        password=row["password"],
        created_at=ensure_utc(row["created_at"]),
        updated_at=ensure_utc(row["updated_at"]),
    )


class SqlUserRepository:
    """Raw-SQL IUserRepository on an AsyncSession (shares the request transaction)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _fetch_one(self, statement: Any, params: dict[str, Any], action: str) -> Any:
        with translate_db_errors(action):
            result = await self.db.execute(statement, params)
            return result.mappings().one_or_none()

    async def get_by_id(self, user_id: int) -> UserEntity:
        row = await self._fetch_one(_GET_BY_ID, {"id": user_id}, "getting user by id")
        if row is None:
            raise NotFoundException(
                details={"resource_type": "user", "resource_id": user_id}
            )
        return _row_to_entity(row)

    async def get_by_email(self, email: str) -> UserEntity:
        row = await self._fetch_one(
            _GET_BY_EMAIL, {"email": email}, "getting user by email"
        )
        if row is None:
            raise NotFoundException(details={"resource_type": "user", "email": email})
        return _row_to_entity(row)

    async def create(self, user: UserEntity) -> UserEntity:
        with translate_db_errors("creating user"):
            result = await self.db.execute(
                _INSERT,
                {
                    "name": user.name,
                    "email": user.email,
                    "password": user.password,
                    "created_at": user.created_at,
                    "updated_at": user.updated_at,
                },
            )
        user.id = result.lastrowid
        return user

    async def update(self, user: UserEntity) -> UserEntity:
        if user.id is None:
            raise NotFoundException(details={"resource_type": "user"})
        with translate_db_errors("updating user"):
            result = await self.db.execute(
                _UPDATE,
                {
                    "id": user.id,
                    "name": user.name,
                    "email": user.email,
                    "password": user.password,
                    "updated_at": user.updated_at,
                },
            )
        if result.rowcount == 0:
            raise NotFoundException(
                details={"resource_type": "user", "resource_id": user.id}
            )
        return user

    async def delete(self, user_id: int) -> None:
        with translate_db_errors("deleting user"):
            result = await self.db.execute(_DELETE, {"id": user_id})
        if result.rowcount == 0:
            raise NotFoundException(
                details={"resource_type": "user", "resource_id": user_id}
            )

    async def list(self, limit: int, offset: int) -> list[UserEntity]:
        with translate_db_errors("listing users"):
            result = await self.db.execute(_LIST, {"limit": limit, "offset": offset})
            rows = result.mappings().all()
        return [_row_to_entity(row) for row in rows]
