"""Notification interface for account events."""

from abc import ABC, abstractmethod

from userapi.domain.value import Email


class Notifier(ABC):
    """Sends notifications to users.

    Implementations live in the adapter layer. Callers run these as
    detached tasks, so implementations may raise freely; the caller logs
    the failure and carries on.
    """

    @abstractmethod
    async def notify_registration(self, name: str, email: Email) -> None:
        """Send a welcome notification to a newly registered user.

        Args:
            name: Display name of the user
            email: Address to notify
        """
        pass
