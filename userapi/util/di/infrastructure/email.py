"""Email infrastructure providers."""

from dishka import Scope, provide

from userapi.adapter.email import SmtpNotifier
from userapi.config import EmailSettings
from userapi.domain.service import Notifier
from userapi.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider sending over SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notifier(self, email_settings: EmailSettings) -> Notifier:
        """Provide SMTP notifier."""
        return SmtpNotifier(settings=email_settings)
