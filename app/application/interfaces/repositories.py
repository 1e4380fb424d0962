"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.entities.user import UserEntity


class IUserRepository(Protocol):
    """Protocol for user repository (DIP).

    Missing rows raise NotFoundException; unique violations raise
    ConflictException; any other database failure raises
    InternalServerException.
    """

    async def get_by_id(self, user_id: int) -> UserEntity:
        """Return user by ID."""

    async def get_by_email(self, email: str) -> UserEntity:
        """Return user by email."""

    async def create(self, user: UserEntity) -> UserEntity:
        """Insert user and return it with the generated id."""

    async def update(self, user: UserEntity) -> UserEntity:
        """Persist all fields of an existing user (matched by id)."""

    async def delete(self, user_id: int) -> None:
        """Delete user by ID."""

    async def list(self, limit: int, offset: int) -> list[UserEntity]:
        """Return users ordered by id with limit/offset paging."""
