"""Domain layer errors.

Client errors (``ValidationError``, ``ConflictError``, ``NotFoundError``,
``InvalidCredentialsError``) must not be retried without changing the
input. ``TransientError`` wraps storage failures and may be retried by
the caller after backoff.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed or inconsistent caller input."""

    pass


class ConflictError(DomainError):
    """A uniqueness rule would be violated."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidCredentialsError(DomainError):
    """Authentication failed.

    Raised identically for an unknown email and for a wrong password.
    """

    def __init__(self) -> None:
        super().__init__("Email or password is incorrect")


class TransientError(DomainError):
    """Storage I/O failure. The original exception is chained as ``__cause__``."""

    pass


class UniquenessViolationError(DomainError):
    """Signalled by a repository when a write hits a unique constraint."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Duplicate {field}: {value}")
