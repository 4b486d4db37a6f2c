"""Repository interfaces for the User API domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from userapi.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
]
