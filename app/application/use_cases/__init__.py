"""Application use cases: one entry point per workflow."""

from app.application.use_cases.users import UserService

__all__ = [
    "UserService",
]
