"""PostgreSQL implementation of User repository."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from userapi.domain.error import NotFoundError, TransientError, UniquenessViolationError
from userapi.domain.model import User
from userapi.domain.repository import UserRepository
from userapi.domain.value import Email, UserId
from userapi.persistence.mappers import row_to_user, user_to_dict
from userapi.persistence.tables import users_table

EMAIL_CONSTRAINT = "uq_users_email"
PRIMARY_KEY_CONSTRAINT = "users_pkey"


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    Each write runs inside a SAVEPOINT, so a unique-constraint failure rolls
    back only that statement and the request session stays usable. A
    successful write is committed before the method returns.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        async with self._storage_errors("find_by_id"):
            stmt = select(users_table).where(users_table.c.id == user_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their normalized email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        async with self._storage_errors("find_by_email"):
            stmt = select(users_table).where(users_table.c.email == email.root)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def exists_by_email(self, email: Email) -> bool:
        """Check whether any user has this email."""
        async with self._storage_errors("exists_by_email"):
            stmt = (
                select(func.count())
                .select_from(users_table)
                .where(users_table.c.email == email.root)
            )
            result = await self.session.execute(stmt)
            return result.scalar_one() > 0

    async def insert(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: User to insert

        Returns:
            Inserted user

        Raises:
            UniquenessViolationError: If the email is already taken
            TransientError: On database failure
        """
        async with self._storage_errors("insert"):
            try:
                async with self.session.begin_nested():
                    await self.session.execute(
                        users_table.insert().values(**user_to_dict(user))
                    )
            except IntegrityError as e:
                violation = self._uniqueness_violation(e, user)
                if violation is None:
                    raise
                raise violation from e
            await self.session.commit()
        return user

    async def update(self, user: User) -> User:
        """Replace the stored fields of an existing user.

        ``id`` and ``created_at`` are never rewritten.

        Args:
            user: User with new values

        Returns:
            Updated user

        Raises:
            NotFoundError: If the user no longer exists
            UniquenessViolationError: If the email is already taken
            TransientError: On database failure
        """
        values = user_to_dict(user)
        del values["id"], values["created_at"]

        async with self._storage_errors("update"):
            try:
                async with self.session.begin_nested():
                    result = await self.session.execute(
                        users_table.update()
                        .where(users_table.c.id == user.id)
                        .values(**values)
                    )
            except IntegrityError as e:
                violation = self._uniqueness_violation(e, user)
                if violation is None:
                    raise
                raise violation from e
            await self.session.commit()

        if result.rowcount == 0:
            raise NotFoundError("User", str(user.id))
        return user

    async def remove(self, user_id: UserId) -> None:
        """Delete a user.

        Args:
            user_id: User ID to delete

        Raises:
            NotFoundError: If the user does not exist
            TransientError: On database failure
        """
        async with self._storage_errors("remove"):
            result = await self.session.execute(
                users_table.delete().where(users_table.c.id == user_id)
            )
            await self.session.commit()

        if result.rowcount == 0:
            raise NotFoundError("User", str(user_id))

    async def list_all(self) -> list[User]:
        """Return every user."""
        async with self._storage_errors("list_all"):
            result = await self.session.execute(select(users_table))
            rows = result.mappings().all()
        return [row_to_user(dict(row)) for row in rows]

    @staticmethod
    def _uniqueness_violation(
        error: IntegrityError, user: User
    ) -> Optional[UniquenessViolationError]:
        """Map unique-key failures; other integrity errors return None."""
        message = str(error.orig)
        if EMAIL_CONSTRAINT in message:
            return UniquenessViolationError("email", user.email.root)
        if PRIMARY_KEY_CONSTRAINT in message:
            return UniquenessViolationError("id", str(user.id))
        return None

    @asynccontextmanager
    async def _storage_errors(self, operation: str) -> AsyncIterator[None]:
        """Log driver failures here and re-raise them as TransientError."""
        try:
            yield
        except (DBAPIError, OSError) as e:
            logfire.exception(
                "User storage failure",
                operation=operation,
                error_type=type(e).__name__,
            )
            raise TransientError(f"User storage unavailable during {operation}") from e
