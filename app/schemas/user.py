"""User API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreateRequest(BaseModel):
    """Request body for creating a user. Presence only: each field must be non-empty."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserUpdateRequest(BaseModel):
    """Request body for updating a user (partial; omitted fields are kept)."""

    name: str | None = None
    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """User response (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class UserDataResponse(BaseModel):
    """Envelope for a single user: {"data": {...}}."""

    data: UserResponse


class UserListResponse(BaseModel):
    """Envelope for a user list: {"data": [...]}."""

    data: list[UserResponse]
