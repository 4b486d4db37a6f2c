"""Get user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from userapi.application.usecase.base import BaseUseCase
from userapi.domain.model import User
from userapi.domain.service import UserIdentityService
from userapi.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: UUID


class UserResponse(BaseModel):
    """Public view of a user. Never carries the password hash."""

    id: str
    first_name: str
    last_name: str | None
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Build the public view of a user."""
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email.root,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class GetUserUseCase(BaseUseCase):
    """Use case for fetching a single user by ID."""

    def __init__(self, user_identity_service: UserIdentityService) -> None:
        """Initialize get user use case.

        Args:
            user_identity_service: User identity domain service
        """
        self.user_identity_service = user_identity_service

    async def execute(self, request: GetUserRequest) -> UserResponse:
        """Execute get user flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_identity_service.get_by_id(UserId(request.user_id))
        return UserResponse.from_user(user)
