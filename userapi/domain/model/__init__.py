"""Domain model entities for the User API."""

from userapi.domain.model.user import User

__all__ = [
    "User",
]
