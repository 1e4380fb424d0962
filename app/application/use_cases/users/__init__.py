"""User use cases."""

from app.application.use_cases.users.user_operations import (
    DEFAULT_LIST_LIMIT,
    UserService,
)

__all__ = [
    "DEFAULT_LIST_LIMIT",
    "UserService",
]
