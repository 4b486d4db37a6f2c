"""User routes."""

import logging
from typing import Annotated
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from userapi.application.usecase.user import (
    AuthenticateUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    RegisterUseCase,
    UpdateUserUseCase,
)
from userapi.application.usecase.user.authenticate import (
    AuthenticateRequest,
    AuthenticateResponse,
)
from userapi.application.usecase.user.delete_user import (
    DeleteUserRequest,
    DeleteUserResponse,
)
from userapi.application.usecase.user.get_user import GetUserRequest, UserResponse
from userapi.application.usecase.user.register import (
    RegisterRequest,
    RegisterResponse,
)
from userapi.application.usecase.user.update_user import (
    UpdateUserRequest,
    UpdateUserResponse,
)
from userapi.domain.value import UserId
from userapi.interface.api.middleware import require_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)

CurrentUserId = Annotated[UserId, Depends(require_user_id)]


class UpdateUserAPIRequest(BaseModel):
    """API request for updating a user. Omitted fields are left unchanged."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None
    confirm_password: str | None = None


@router.post("/authenticate", response_model=AuthenticateResponse)
async def authenticate(
    request: AuthenticateRequest,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> AuthenticateResponse:
    """Log in with email and password.

    Example:
        POST /users/authenticate
        {"email": "ann@example.com", "password": "Secret1", "confirm_password": "Secret1"}

        Response:
        {
            "id": "123e4567-e89b-12d3-a456-426614174000",
            "first_name": "Ann",
            "last_name": null,
            "email": "ann@example.com",
            "created_at": "2025-01-15T12:34:56Z",
            "updated_at": "2025-01-15T12:34:56Z",
            "token": "eyJ..."
        }
    """
    return await authenticate_use_case.execute(request)


@router.post("/register", response_model=RegisterResponse)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an account. A welcome email is sent in the background."""
    return await register_use_case.execute(request)


@router.get("", response_model=list[UserResponse])
async def list_users(
    caller_id: CurrentUserId,
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> list[UserResponse]:
    """List all users."""
    return await list_users_use_case.execute()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    caller_id: CurrentUserId,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse:
    """Get a user by ID."""
    return await get_user_use_case.execute(GetUserRequest(user_id=user_id))


@router.put("/{user_id}", response_model=UpdateUserResponse)
async def update_user(
    user_id: UUID,
    request: UpdateUserAPIRequest,
    caller_id: CurrentUserId,
    update_user_use_case: FromDishka[UpdateUserUseCase],
) -> UpdateUserResponse:
    """Update a user's details or password."""
    logger.info(f"User {caller_id} updating user {user_id}")
    return await update_user_use_case.execute(
        UpdateUserRequest(user_id=user_id, **request.model_dump())
    )


@router.delete("/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: UUID,
    caller_id: CurrentUserId,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
) -> DeleteUserResponse:
    """Delete a user."""
    logger.info(f"User {caller_id} deleting user {user_id}")
    return await delete_user_use_case.execute(DeleteUserRequest(user_id=user_id))
