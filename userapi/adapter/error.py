"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class NotificationError(AdapterError):
    """A notification could not be composed or delivered."""

    pass
