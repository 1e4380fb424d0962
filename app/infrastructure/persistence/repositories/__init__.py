"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import (
    BaseRepository,
    translate_db_errors,
)
from app.infrastructure.persistence.repositories.sql_user_repo import SqlUserRepository
from app.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "SqlUserRepository",
    "UserRepository",
    "translate_db_errors",
]
