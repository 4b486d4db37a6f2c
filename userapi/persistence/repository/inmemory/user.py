"""In-memory user repository for testing."""

from typing import Optional

from userapi.domain.error import NotFoundError, UniquenessViolationError
from userapi.domain.model.user import User
from userapi.domain.repository.user import UserRepository
from userapi.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Keeps an email index next to the users and checks and writes it with
    no await in between, which makes each write atomic on the event loop
    the same way a unique constraint is atomic in the database.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._ids_by_email: dict[Email, UserId] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        user_id = self._ids_by_email.get(email)
        return self._users.get(user_id) if user_id else None

    async def exists_by_email(self, email: Email) -> bool:
        """Check whether any user has this email."""
        return email in self._ids_by_email

    async def insert(self, user: User) -> User:
        """Insert a new user, enforcing unique id and email."""
        if user.id in self._users:
            raise UniquenessViolationError("id", str(user.id))
        if user.email in self._ids_by_email:
            raise UniquenessViolationError("email", user.email.root)
        self._users[user.id] = user
        self._ids_by_email[user.email] = user.id
        return user

    async def update(self, user: User) -> User:
        """Replace an existing user, enforcing unique email."""
        current = self._users.get(user.id)
        if current is None:
            raise NotFoundError("User", str(user.id))
        owner = self._ids_by_email.get(user.email)
        if owner is not None and owner != user.id:
            raise UniquenessViolationError("email", user.email.root)

        del self._ids_by_email[current.email]
        self._ids_by_email[user.email] = user.id
        self._users[user.id] = user.model_copy(update={"created_at": current.created_at})
        return self._users[user.id]

    async def remove(self, user_id: UserId) -> None:
        """Delete a user."""
        user = self._users.pop(user_id, None)
        if user is None:
            raise NotFoundError("User", str(user_id))
        del self._ids_by_email[user.email]

    async def list_all(self) -> list[User]:
        """Return every user."""
        return list(self._users.values())
