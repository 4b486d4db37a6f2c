"""Domain layer DI providers."""

from dishka import Scope, provide

from userapi.config import AuthSettings, PasswordSettings
from userapi.domain.repository import UserRepository
from userapi.domain.service import (
    JWTService,
    Notifier,
    PasswordService,
    UserIdentityService,
)
from userapi.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    The hashing and token services hold no per-request state and live for
    the whole app. The identity service is REQUEST-scoped because it
    depends on the request's repository and session.
    """

    @provide(scope=Scope.APP)
    def get_password_service(
        self, password_settings: PasswordSettings
    ) -> PasswordService:
        """Provide Argon2 password service."""
        return PasswordService(password_settings=password_settings)

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.REQUEST)
    def get_user_identity_service(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        jwt_service: JWTService,
        notifier: Notifier,
    ) -> UserIdentityService:
        """Provide user identity domain service."""
        return UserIdentityService(
            user_repository=user_repository,
            password_service=password_service,
            jwt_service=jwt_service,
            notifier=notifier,
        )
