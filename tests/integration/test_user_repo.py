"""Integration tests for the ORM and raw-SQL user repositories.

Both implementations run against the same SQLite schema and must behave
identically. Requires the sqlite_db fixture (via db_session).
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities.user import UserEntity
from app.domain.exceptions import (
    ConflictException,
    InternalServerException,
    NotFoundException,
)
from app.infrastructure.persistence.repositories import (
    SqlUserRepository,
    UserRepository,
)

pytestmark = pytest.mark.requires_db

T0 = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture(params=[UserRepository, SqlUserRepository], ids=["orm", "sql"])
def repo(request, db_session: AsyncSession):
    return request.param(db_session)


def _user(name: str = "Alice", email: str = "alice@example.com") -> UserEntity:
    return UserEntity(
        name=name,
        email=email,
        password="stored-hash",
        created_at=T0,
        updated_at=T0,
    )


async def test_create_assigns_id_and_round_trips(repo) -> None:
    created = await repo.create(_user())
    assert created.id is not None

    by_id = await repo.get_by_id(created.id)
    assert by_id.name == "Alice"
    assert by_id.email == "alice@example.com"
    assert by_id.password == "stored-hash"
    assert by_id.created_at == T0
    assert by_id.updated_at == T0

    by_email = await repo.get_by_email("alice@example.com")
    assert by_email.id == created.id


async def test_missing_rows_raise_not_found(repo) -> None:
    with pytest.raises(NotFoundException):
        await repo.get_by_id(12345)
    with pytest.raises(NotFoundException):
        await repo.get_by_email("nobody@example.com")
    with pytest.raises(NotFoundException):
        await repo.delete(12345)
    ghost = _user()
    ghost.id = 12345
    with pytest.raises(NotFoundException):
        await repo.update(ghost)


async def test_duplicate_email_raises_conflict(repo) -> None:
    await repo.create(_user())
    with pytest.raises(ConflictException):
        await repo.create(_user(name="Other"))


async def test_update_writes_all_mutable_columns(repo, db_session: AsyncSession) -> None:
    created = await repo.create(_user())
    later = T0 + timedelta(hours=1)
    created.name = "Alice B."
    created.email = "alice.b@example.com"
    created.password = "new-hash"
    created.updated_at = later

    await repo.update(created)
    db_session.expunge_all()

    stored = await repo.get_by_id(created.id)
    assert stored.name == "Alice B."
    assert stored.email == "alice.b@example.com"
    assert stored.password == "new-hash"
    assert stored.created_at == T0
    assert stored.updated_at == later


async def test_delete_removes_row(repo, db_session: AsyncSession) -> None:
    created = await repo.create(_user())
    await repo.delete(created.id)
    db_session.expunge_all()
    with pytest.raises(NotFoundException):
        await repo.get_by_id(created.id)


async def test_list_orders_by_id_with_limit_and_offset(repo) -> None:
    for i in range(5):
        await repo.create(_user(name=f"User {i}", email=f"user{i}@example.com"))

    first = await repo.list(2, 0)
    assert [u.name for u in first] == ["User 0", "User 1"]

    tail = await repo.list(10, 3)
    assert [u.name for u in tail] == ["User 3", "User 4"]

    assert await repo.list(10, 10) == []


@pytest.fixture
def failing_execute(db_session: AsyncSession, monkeypatch) -> None:
    """Make every statement on db_session fail as if the database went away."""
    error = OperationalError("SELECT", {}, Exception("database is locked"))
    monkeypatch.setattr(db_session, "execute", AsyncMock(side_effect=error))


@pytest.mark.usefixtures("failing_execute")
async def test_unexpected_database_errors_become_internal_server_error(repo) -> None:
    with pytest.raises(InternalServerException):
        await repo.get_by_id(1)
    with pytest.raises(InternalServerException):
        await repo.get_by_email("alice@example.com")
    with pytest.raises(InternalServerException):
        await repo.list(10, 0)
    with pytest.raises(InternalServerException):
        await repo.delete(1)
    existing = _user()
    existing.id = 1
    with pytest.raises(InternalServerException):
        await repo.update(existing)
