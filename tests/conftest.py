"""Pytest configuration and fixtures for the user service.

Uses app.main:app for HTTP tests and app.infrastructure.persistence.database
for DB-dependent fixtures. Every DB-backed test gets its own SQLite file
under tmp_path, so tests never share rows.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.main import app


@pytest.fixture
async def sqlite_db(tmp_path, monkeypatch):
    """Point settings at a fresh SQLite file, create tables, dispose engine afterwards."""
    monkeypatch.setenv("DB_DRIVER", "sqlite")
    monkeypatch.setenv("SQLITE_PATH", str(tmp_path / "users.db"))
    get_settings.cache_clear()
    await database.dispose_engine()
    await database.init_models()
    yield
    await database.dispose_engine()
    get_settings.cache_clear()


@pytest.fixture(params=["orm", "sql"])
def user_repository_backend(request, monkeypatch) -> str:
    """Run the requesting test once per IUserRepository implementation."""
    monkeypatch.setenv("USER_REPOSITORY", request.param)
    get_settings.cache_clear()
    return request.param


@pytest.fixture
async def client(sqlite_db) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) backed by a fresh SQLite file.

    ASGITransport does not run the lifespan; sqlite_db creates the schema instead.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session(sqlite_db) -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test."""
    database._ensure_engine()
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
