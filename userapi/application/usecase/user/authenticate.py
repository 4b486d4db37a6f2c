"""Authenticate use case."""

from pydantic import BaseModel

from userapi.application.usecase.base import BaseUseCase
from userapi.application.usecase.user.get_user import UserResponse
from userapi.domain.service import UserIdentityService


class AuthenticateRequest(BaseModel):
    """Login credentials."""

    email: str
    password: str
    confirm_password: str


class AuthenticateResponse(UserResponse):
    """Authenticated user with a bearer token."""

    token: str


class AuthenticateUseCase(BaseUseCase):
    """Use case for email/password login."""

    def __init__(self, user_identity_service: UserIdentityService) -> None:
        """Initialize authenticate use case.

        Args:
            user_identity_service: User identity domain service
        """
        self.user_identity_service = user_identity_service

    async def execute(self, request: AuthenticateRequest) -> AuthenticateResponse:
        """Execute login flow.

        Steps:
        1. Verify credentials via the identity service
        2. Return public user fields with the issued token

        Args:
            request: Credentials

        Returns:
            User information and token

        Raises:
            ValidationError: If password and confirmation differ
            InvalidCredentialsError: If email or password is wrong
        """
        user, token = await self.user_identity_service.authenticate(
            request.email, request.password, request.confirm_password
        )
        return AuthenticateResponse(
            **UserResponse.from_user(user).model_dump(),
            token=token,
        )
