"""Delete user use case."""

from uuid import UUID

from pydantic import BaseModel

from userapi.application.usecase.base import BaseUseCase
from userapi.domain.service import UserIdentityService
from userapi.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: UUID


class DeleteUserResponse(BaseModel):
    """Deletion confirmation."""

    message: str = "User deleted successfully"


class DeleteUserUseCase(BaseUseCase):
    """Use case for deleting a user."""

    def __init__(self, user_identity_service: UserIdentityService) -> None:
        self.user_identity_service = user_identity_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute delete flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        await self.user_identity_service.delete(UserId(request.user_id))
        return DeleteUserResponse()
