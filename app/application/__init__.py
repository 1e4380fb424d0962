"""Application layer: interfaces and use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from app.application.interfaces import IUserRepository
from app.application.use_cases import UserService

__all__ = [
    "IUserRepository",
    "UserService",
]
