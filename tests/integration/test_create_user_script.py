"""scripts/create_user.py against a per-test SQLite database."""

import pytest
from sqlalchemy import select

from app.application.use_cases.users import UserService
from app.domain.exceptions import ConflictException, InternalServerException
from app.infrastructure.persistence import database
from app.infrastructure.persistence.models.user import User
from scripts.create_user import create_user

pytestmark = [pytest.mark.requires_db, pytest.mark.usefixtures("sqlite_db")]


async def _stored_users() -> list[User]:
    database._ensure_engine()
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        result = await session.execute(select(User).order_by(User.id))
        return list(result.scalars().all())


async def test_create_user_commits_and_disposes_engine(user_repository_backend: str) -> None:
    user = await create_user("Alice", "alice@example.com", "s3cret")

    assert user.id is not None
    assert database.engine is None
    stored = await _stored_users()
    assert [(u.id, u.email) for u in stored] == [(user.id, "alice@example.com")]
    assert stored[0].password != "s3cret"


async def test_duplicate_email_is_rejected(user_repository_backend: str) -> None:
    await create_user("Alice", "alice@example.com", "s3cret")
    with pytest.raises(ConflictException):
        await create_user("Other", "alice@example.com", "pw")

    assert database.engine is None
    assert len(await _stored_users()) == 1


async def test_failure_after_insert_rolls_back(monkeypatch, user_repository_backend: str) -> None:
    original_create = UserService.create

    async def create_then_fail(self, user):
        await original_create(self, user)
        raise InternalServerException()

    monkeypatch.setattr(UserService, "create", create_then_fail)

    with pytest.raises(InternalServerException):
        await create_user("Alice", "alice@example.com", "s3cret")

    assert database.engine is None
    assert await _stored_users() == []
