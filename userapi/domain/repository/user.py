"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from userapi.domain.model.user import User
from userapi.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.

    Email uniqueness is enforced by the implementation at write time:
    ``insert`` and ``update`` raise ``UniquenessViolationError`` instead of
    storing a second user with the same email. Storage I/O failures are
    raised as ``TransientError``.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their normalized email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_email(self, email: Email) -> bool:
        """Check whether any user has this email.

        Args:
            email: Email to look for

        Returns:
            True if a user with the email exists
        """
        pass

    @abstractmethod
    async def insert(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The inserted user

        Raises:
            UniquenessViolationError: If the email is already taken
            TransientError: On storage failure
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Replace an existing user.

        Args:
            user: The user with its new field values

        Returns:
            The updated user

        Raises:
            NotFoundError: If no user has this ID
            UniquenessViolationError: If the new email belongs to another user
            TransientError: On storage failure
        """
        pass

    @abstractmethod
    async def remove(self, user_id: UserId) -> None:
        """Delete a user permanently.

        Args:
            user_id: The user's unique identifier

        Raises:
            NotFoundError: If no user has this ID
            TransientError: On storage failure
        """
        pass

    @abstractmethod
    async def list_all(self) -> list[User]:
        """Return every user. Ordering is not guaranteed."""
        pass
