"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationRequiredError(InterfaceError):
    """A protected route was called without a valid bearer token."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)
