"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Engine and session factory are created lazily on first use (get_db /
get_db_transactional / init_models) so import does not trigger Settings
validation. The URL comes from Settings.database_url: sqlite+aiosqlite
or mysql+aiomysql depending on DB_DRIVER.

There is no migration tool; init_models() creates missing tables at startup.
"""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def _engine_kwargs(settings: Settings) -> dict[str, Any]:
    """Driver-specific create_async_engine options."""
    kwargs: dict[str, Any] = {"echo": settings.database_echo}
    if settings.db_driver == "mysql":
        kwargs.update(
            pool_pre_ping=True,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    return kwargs


def _prepare_sqlite_path(path: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    if path == ":memory:" or path.startswith("file:"):
        return
    Path(path).expanduser().parent.mkdir(parents=True, exist_ok=True)


def _ensure_engine() -> None:
    """Create engine and AsyncSessionLocal on first use."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    if settings.db_driver == "sqlite":
        _prepare_sqlite_path(settings.sqlite_path)
    engine = create_async_engine(settings.database_url, **_engine_kwargs(settings))
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )
    logger.info("Database engine created (driver=%s)", settings.db_driver)


def get_engine() -> AsyncEngine:
    """Return the process engine, creating it on first use."""
    _ensure_engine()
    assert engine is not None
    return engine


async def init_models() -> None:
    """Create all tables registered on Base.metadata (no-op for existing tables)."""
    # Register models on Base.metadata before create_all.
    from app.infrastructure.persistence import models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ensured")


async def ping() -> None:
    """Run SELECT 1; raises the driver error when the database is unreachable."""
    async with get_engine().connect() as conn:
        await conn.execute(text("SELECT 1"))


async def dispose_engine() -> None:
    """Dispose the engine and forget it so the next use builds a fresh one."""
    global engine, AsyncSessionLocal
    if engine is None:
        return
    await engine.dispose()
    engine = None
    AsyncSessionLocal = None
    logger.info("Database engine disposed")


async def get_db():
    """Database session dependency for read operations.

    Does not commit; use get_db_transactional for writes.
    Yields a session and closes it on exit.
    """
    _ensure_engine()
    assert AsyncSessionLocal is not None
    async with AsyncSessionLocal() as session:
        yield session


async def get_db_transactional():
    """Database session dependency for write operations.

    Begins a transaction, commits on success, rolls back on exception.
    Use for POST, PUT, PATCH, DELETE endpoints.
    """
    _ensure_engine()
    assert AsyncSessionLocal is not None
    async with AsyncSessionLocal() as session:
        async with session.begin():
            yield session
