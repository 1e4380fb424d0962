"""User domain entity.

Represents the business concept of a user, independent of persistence.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class UserEntity:
    """Domain entity for a user.

    ``password`` holds the stored (hashed) value once persisted and is never
    exposed by response schemas. ``id`` is None until the repository assigns it.
    """

    name: str
    email: str
    password: str = field(default="", repr=False)
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def apply_changes(
        self,
        *,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> None:
        """Overwrite the fields that were supplied (partial update); None leaves a field as is."""
        if name is not None:
            self.name = name
        if email is not None:
            self.email = email
        if password is not None:
            self.password = password

    def touch(self, now: datetime) -> None:
        """Stamp updated_at (and created_at on first persist) with now."""
        if self.created_at is None:
            self.created_at = now
        self.updated_at = now
