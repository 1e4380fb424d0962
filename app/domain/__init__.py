"""Domain layer: entities and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import UserEntity
from app.domain.exceptions import (
    BadRequestException,
    ConflictException,
    InternalServerException,
    InvalidCredentialsException,
    NotFoundException,
    UserServiceException,
)

__all__ = [
    # Entities
    "UserEntity",
    # Exceptions
    "BadRequestException",
    "ConflictException",
    "InternalServerException",
    "InvalidCredentialsException",
    "NotFoundException",
    "UserServiceException",
]
