"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.mixins import (
    IntegerIdMixin,
    TimestampedModel,
    TimestampMixin,
)
from app.infrastructure.persistence.models.user import User

__all__ = [
    "User",
    "IntegerIdMixin",
    "TimestampMixin",
    "TimestampedModel",
]
