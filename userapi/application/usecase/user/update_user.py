"""Update user use case."""

from uuid import UUID

from pydantic import BaseModel

from userapi.application.usecase.base import BaseUseCase
from userapi.domain.service import UserIdentityService
from userapi.domain.value import UserId


class UpdateUserRequest(BaseModel):
    """Partial update. Missing or empty fields are left unchanged."""

    user_id: UUID
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None
    confirm_password: str | None = None


class UpdateUserResponse(BaseModel):
    """Update confirmation."""

    message: str = "User updated successfully"


class UpdateUserUseCase(BaseUseCase):
    """Use case for updating a user's details or password."""

    def __init__(self, user_identity_service: UserIdentityService) -> None:
        """Initialize update user use case.

        Args:
            user_identity_service: User identity domain service
        """
        self.user_identity_service = user_identity_service

    async def execute(self, request: UpdateUserRequest) -> UpdateUserResponse:
        """Execute update flow.

        Raises:
            ValidationError: If password and confirmation differ or email is malformed
            NotFoundError: If the user does not exist
            ConflictError: If the new email is taken
        """
        await self.user_identity_service.update(
            UserId(request.user_id),
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password=request.password,
            confirm_password=request.confirm_password,
        )
        return UpdateUserResponse()
