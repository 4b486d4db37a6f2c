"""Register use case."""

from pydantic import BaseModel

from userapi.application.usecase.base import BaseUseCase
from userapi.domain.service import UserIdentityService


class RegisterRequest(BaseModel):
    """New account details."""

    first_name: str
    last_name: str | None = None
    email: str
    password: str
    confirm_password: str


class RegisterResponse(BaseModel):
    """Registration confirmation."""

    message: str = "Registration successful! Check your email!"


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account.

    The welcome email is sent in the background by the identity service;
    this use case returns as soon as the user is stored.
    """

    def __init__(self, user_identity_service: UserIdentityService) -> None:
        """Initialize register use case.

        Args:
            user_identity_service: User identity domain service
        """
        self.user_identity_service = user_identity_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Raises:
            ValidationError: If input is missing, malformed or inconsistent
            ConflictError: If the email is already taken
        """
        await self.user_identity_service.register(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password=request.password,
            confirm_password=request.confirm_password,
        )
        return RegisterResponse()
