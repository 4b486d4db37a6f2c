"""Email notification adapter."""

from .notifier import MockNotifier, SecureSocketOption, SmtpNotifier

__all__ = [
    "MockNotifier",
    "SecureSocketOption",
    "SmtpNotifier",
]
