"""Domain value objects for the User API."""

from userapi.domain.value.identifiers import UserId
from userapi.domain.value.types import Email, normalize_email

__all__ = [
    # Identifiers
    "UserId",
    # Types
    "Email",
    "normalize_email",
]
