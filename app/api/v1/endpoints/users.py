"""User API: thin routes delegating to UserService.

Path ids must be integers in the signed 64-bit range (anything else is a
400 from the exception handlers). Domain exceptions raised by the use case
propagate to the handlers, which map them to status codes.
"""

import re
from typing import Annotated

from fastapi import APIRouter, Depends, Path

from app.application.use_cases.users import UserService
from app.api.v1.dependencies import get_user_service, get_user_service_for_write
from app.domain.entities.user import UserEntity
from app.schemas.user import (
    UserCreateRequest,
    UserDataResponse,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)

router = APIRouter()

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")

UserId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


def parse_int_query(raw: str | None) -> int:
    """Parse an optional integer query value.

    Accepts an optional sign followed by ASCII digits only. Missing or
    malformed values, and values outside the signed 64-bit range, yield 0.
    """
    if raw is None or not _INTEGER.fullmatch(raw):
        return 0
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        return 0
    return value


def _to_data(user: UserEntity) -> UserDataResponse:
    return UserDataResponse(data=UserResponse.model_validate(user))


@router.get("", response_model=UserListResponse)
async def list_users(
    user_service: Annotated[UserService, Depends(get_user_service)],
    limit: str | None = None,
    offset: str | None = None,
):
    """List users (paginated; limit defaults to 10, offset to 0)."""
    users = await user_service.list(parse_int_query(limit), parse_int_query(offset))
    return UserListResponse(data=[UserResponse.model_validate(u) for u in users])


@router.get("/{user_id}", response_model=UserDataResponse)
async def get_user(
    user_id: UserId,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Get user by id."""
    user = await user_service.get_by_id(user_id)
    return _to_data(user)


@router.post("", response_model=UserDataResponse, status_code=201)
async def create_user(
    body: UserCreateRequest,
    user_service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Create a user; 409 when the email is already registered."""
    user = await user_service.create(
        UserEntity(name=body.name, email=body.email, password=body.password)
    )
    return _to_data(user)


@router.put("/{user_id}", response_model=UserDataResponse)
async def update_user(
    user_id: UserId,
    body: UserUpdateRequest,
    user_service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Update the supplied fields of a user."""
    user = await user_service.update(
        user_id,
        name=body.name,
        email=body.email,
        password=body.password,
    )
    return _to_data(user)


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user_id: UserId,
    user_service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Delete a user by id."""
    await user_service.delete(user_id)
    return None
