"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and the user use case.
The use case is built from infrastructure implementations here;
routes depend only on these dependencies, not on infra directly.

USER_REPOSITORY selects the IUserRepository implementation: 'orm'
(SQLAlchemy ORM) or 'sql' (raw SQL text). Both share the request session.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.repositories import IUserRepository
from app.application.use_cases.users import UserService
from app.core.config import get_settings
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import (
    SqlUserRepository,
    UserRepository,
)
from app.infrastructure.security.password import get_password_hash


def build_user_repository(db: AsyncSession) -> IUserRepository:
    """Return the configured IUserRepository bound to this session."""
    if get_settings().user_repository == "sql":
        return SqlUserRepository(db)
    return UserRepository(db)


async def get_user_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserService:
    """User use case for read operations."""
    return UserService(build_user_repository(db), password_hasher=get_password_hash)


async def get_user_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> UserService:
    """User use case for writes (transactional: commit on success, rollback on error)."""
    return UserService(build_user_repository(db), password_hasher=get_password_hash)
