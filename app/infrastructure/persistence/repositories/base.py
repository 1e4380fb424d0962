"""Base repository: generic CRUD over one model plus database error translation."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import delete as sa_delete, select, update as sa_update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import ConflictException, InternalServerException
from app.infrastructure.persistence.database import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


@contextmanager
def translate_db_errors(action: str) -> Iterator[None]:
    """Map SQLAlchemy errors raised inside the block to domain exceptions.

    IntegrityError (unique email) becomes ConflictException; any other
    SQLAlchemyError is logged with its traceback and becomes
    InternalServerException. Domain exceptions pass through untouched.
    """
    try:
        yield
    except IntegrityError as exc:
        logger.info("Integrity error while %s: %s", action, exc.orig)
        raise ConflictException() from exc
    except SQLAlchemyError as exc:
        logger.exception("Database error while %s", action)
        raise InternalServerException() from exc


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, get_all, create, update_by_id and delete_by_id.

    Methods return ORM instances (or affected row counts); subclasses map
    them to domain entities and decide what a missing row means.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: int) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[ModelType]:
        """Return records ordered by primary key with pagination."""
        model: Any = self.model
        result = await self.db.execute(
            select(self.model).order_by(model.id).offset(skip).limit(limit)
        )
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record; flush so generated columns (id) are populated."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update_by_id(self, entity_id: int, values: dict[str, Any]) -> int:
        """UPDATE the row with this primary key; return the number of rows matched."""
        model: Any = self.model
        result = await self.db.execute(
            sa_update(self.model)
            .where(model.id == entity_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def delete_by_id(self, entity_id: int) -> int:
        """DELETE the row with this primary key; return the number of rows removed."""
        model: Any = self.model
        result = await self.db.execute(
            sa_delete(self.model)
            .where(model.id == entity_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
