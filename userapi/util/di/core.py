"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from userapi.config import AuthSettings, EmailSettings, PasswordSettings, Settings
from userapi.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Configuration provider.

    Settings are read once per container from the environment and ``.env``.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_password_settings(self, settings: Settings) -> PasswordSettings:
        return settings.password

    @provide
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        return settings.email
