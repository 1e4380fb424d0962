"""User operations: get, create, update, delete, list (delegate to IUserRepository)."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from app.application.interfaces.repositories import IUserRepository
from app.domain.entities.user import UserEntity
from app.domain.exceptions import ConflictException, NotFoundException
from app.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 10


class UserService:
    """Create and query users. Stamps timestamps and enforces unique email on create."""

    def __init__(
        self,
        user_repo: IUserRepository,
        password_hasher: Callable[[str], str],
    ) -> None:
        self.user_repo = user_repo
        self.password_hasher = password_hasher

    async def _hash(self, password: str) -> str:
        # bcrypt is CPU bound; keep it off the event loop.
        return await asyncio.to_thread(self.password_hasher, password)

    async def get_by_id(self, user_id: int) -> UserEntity:
        """Return user by id; NotFoundException/InternalServerException pass through."""
        return await self.user_repo.get_by_id(user_id)

    async def create(self, user: UserEntity) -> UserEntity:
        """Create a user; raise ConflictException if the email is already registered.

        Lookup errors other than NotFoundException propagate unchanged.
        """
        try:
            await self.user_repo.get_by_email(user.email)
        except NotFoundException:
            pass
        else:
            logger.info("Rejected user create: email already registered")
            raise ConflictException(details={"field": "email"})

        user.password = await self._hash(user.password)
        now = utc_now()
        user.created_at = now
        user.updated_at = now
        return await self.user_repo.create(user)

    async def update(
        self,
        user_id: int,
        *,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> UserEntity:
        """Apply supplied fields to an existing user and persist.

        Raises whatever get_by_id raises when the user cannot be loaded.
        """
        user = await self.user_repo.get_by_id(user_id)
        hashed = await self._hash(password) if password is not None else None
        user.apply_changes(name=name, email=email, password=hashed)
        user.touch(utc_now())
        return await self.user_repo.update(user)

    async def delete(self, user_id: int) -> None:
        await self.user_repo.delete(user_id)

    async def list(self, limit: int, offset: int) -> list[UserEntity]:
        """Return a page of users. limit <= 0 becomes DEFAULT_LIST_LIMIT; negative offset becomes 0."""
        if limit <= 0:
            limit = DEFAULT_LIST_LIMIT
        if offset < 0:
            offset = 0
        return await self.user_repo.list(limit, offset)
