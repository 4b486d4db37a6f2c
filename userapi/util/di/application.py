"""Application layer DI providers."""

from dishka import Scope, provide

from userapi.application.usecase.user import (
    AuthenticateUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    RegisterUseCase,
    UpdateUserUseCase,
)
from userapi.domain.service import UserIdentityService
from userapi.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_authenticate_use_case(
        self, user_identity_service: UserIdentityService
    ) -> AuthenticateUseCase:
        """Provide authenticate use case."""
        return AuthenticateUseCase(user_identity_service=user_identity_service)

    @provide
    def get_register_use_case(
        self, user_identity_service: UserIdentityService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_identity_service=user_identity_service)

    @provide
    def get_get_user_use_case(
        self, user_identity_service: UserIdentityService
    ) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_identity_service=user_identity_service)

    @provide
    def get_list_users_use_case(
        self, user_identity_service: UserIdentityService
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_identity_service=user_identity_service)

    @provide
    def get_update_user_use_case(
        self, user_identity_service: UserIdentityService
    ) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_identity_service=user_identity_service)

    @provide
    def get_delete_user_use_case(
        self, user_identity_service: UserIdentityService
    ) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_identity_service=user_identity_service)
