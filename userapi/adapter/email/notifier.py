"""SMTP notifier.

Sends welcome emails through a plain SMTP relay. ``smtplib`` is blocking,
so delivery runs in a worker thread.
"""

import asyncio
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr
from enum import Enum

import logfire

from userapi.adapter.error import NotificationError
from userapi.config import EmailSettings
from userapi.domain.service.notifier import Notifier
from userapi.domain.value import Email

SMTPS_PORT = 465


class SecureSocketOption(str, Enum):
    """How the SMTP connection is secured."""

    NONE = "none"
    AUTO = "auto"
    SSL_ON_CONNECT = "ssl_on_connect"
    STARTTLS = "starttls"
    STARTTLS_WHEN_AVAILABLE = "starttls_when_available"

    @classmethod
    def parse(cls, value: str | None) -> "SecureSocketOption":
        """Parse a configured TLS mode.

        Case, underscores and hyphens are ignored, so ``StartTls`` and
        ``start-tls`` both mean STARTTLS. Empty or unknown values mean AUTO.
        """
        if not value or not value.strip():
            return cls.AUTO
        key = value.strip().lower().replace("_", "").replace("-", "")
        for option in cls:
            if option.value.replace("_", "") == key:
                return option
        return cls.AUTO

    def resolve(self, port: int) -> "SecureSocketOption":
        """Turn AUTO into a concrete mode based on the port."""
        if self is not SecureSocketOption.AUTO:
            return self
        if port == SMTPS_PORT:
            return SecureSocketOption.SSL_ON_CONNECT
        return SecureSocketOption.STARTTLS_WHEN_AVAILABLE


class SmtpNotifier(Notifier):
    """Notifier that sends email over SMTP."""

    def __init__(self, settings: EmailSettings) -> None:
        """Initialize SMTP notifier.

        Args:
            settings: SMTP connection and message settings
        """
        self.settings = settings
        self.secure_socket_option = SecureSocketOption.parse(
            settings.secure_socket_options
        ).resolve(settings.port)

    async def notify_registration(self, name: str, email: Email) -> None:
        """Send the welcome email.

        Args:
            name: Recipient display name
            email: Recipient address

        Raises:
            NotificationError: If the message cannot be composed or sent
        """
        message = self.compose(
            to_name=name,
            to_email=email.root,
            subject=self.settings.welcome_subject,
            body=self.settings.welcome_body,
        )
        with logfire.span(
            "smtp_notifier.notify_registration",
            host=self.settings.host,
            port=self.settings.port,
            tls=self.secure_socket_option.value,
        ):
            await asyncio.to_thread(self.send, message)

    def compose(
        self,
        to_name: str,
        to_email: str,
        subject: str | None,
        body: str,
        from_email: str | None = None,
    ) -> EmailMessage:
        """Build a plain-text message.

        Args:
            to_name: Recipient display name
            to_email: Recipient address
            subject: Subject line (a default greeting is used when empty)
            body: Message text
            from_email: Sender address (defaults to ``smtp_from``)

        Returns:
            Message ready to send

        Raises:
            NotificationError: If the body or recipient is missing
        """
        if not body:
            raise NotificationError("Cannot send an email without a body")
        if not to_email:
            raise NotificationError("Cannot send an email without a recipient")

        message = EmailMessage()
        message["From"] = from_email or self.settings.smtp_from
        message["To"] = formataddr((to_name, to_email))
        message["Subject"] = subject or "Hello from the User API!"
        message.set_content(body)
        return message

    def send(self, message: EmailMessage) -> None:
        """Deliver a message synchronously.

        Args:
            message: Message to deliver

        Raises:
            NotificationError: On connection, TLS, authentication or send failure
        """
        settings = self.settings
        option = self.secure_socket_option
        context = ssl.create_default_context()

        try:
            if option is SecureSocketOption.SSL_ON_CONNECT:
                client = smtplib.SMTP_SSL(
                    settings.host,
                    settings.port,
                    timeout=settings.timeout,
                    context=context,
                )
            else:
                client = smtplib.SMTP(
                    settings.host, settings.port, timeout=settings.timeout
                )

            with client:
                client.ehlo()
                if option is SecureSocketOption.STARTTLS or (
                    option is SecureSocketOption.STARTTLS_WHEN_AVAILABLE
                    and client.has_extn("starttls")
                ):
                    client.starttls(context=context)
                    client.ehlo()

                if settings.smtp_auth_required:
                    client.login(settings.username or "", settings.password or "")

                client.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(f"Failed to send email: {e}") from e


class MockNotifier(Notifier):
    """Mock notifier for testing.

    Records every notification instead of sending it. Set ``fail`` to make
    delivery raise.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[tuple[str, Email]] = []

    async def notify_registration(self, name: str, email: Email) -> None:
        """Record the notification, or raise when configured to fail."""
        if self.fail:
            raise NotificationError("Mock notifier configured to fail")
        self.sent.append((name, email))
