"""List users use case."""

from userapi.application.usecase.base import BaseUseCase
from userapi.application.usecase.user.get_user import UserResponse
from userapi.domain.service import UserIdentityService


class ListUsersUseCase(BaseUseCase):
    """Use case for listing all users."""

    def __init__(self, user_identity_service: UserIdentityService) -> None:
        self.user_identity_service = user_identity_service

    async def execute(self, request: None = None) -> list[UserResponse]:
        """Return every user in public form."""
        users = await self.user_identity_service.get_all()
        return [UserResponse.from_user(user) for user in users]
