"""User aggregate root.

A user is a person who can authenticate with an email and password.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from userapi.domain.model.common import DomainModel
from userapi.domain.value import Email, UserId

NAME_MAX_LENGTH = 255


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class User(DomainModel):
    """User aggregate root.

    The email is unique across all users (compared in normalized form).
    ``password_hash`` is an opaque Argon2 string and is never part of a
    response model.
    """

    id: UserId
    first_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: Optional[str] = Field(default=None, max_length=NAME_MAX_LENGTH)
    email: Email
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def full_name(self) -> str:
        """First and last name joined for display."""
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name
