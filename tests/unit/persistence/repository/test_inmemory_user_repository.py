"""Unit tests for InMemoryUserRepository."""

from datetime import timedelta
from uuid import uuid4

import pytest

from userapi.domain.error import NotFoundError, UniquenessViolationError
from userapi.domain.model import User
from userapi.domain.value import Email, UserId
from userapi.persistence.repository.inmemory import InMemoryUserRepository


def make_user(email: str = "ann@example.com", first_name: str = "Ann") -> User:
    return User(
        id=UserId(uuid4()),
        first_name=first_name,
        email=Email(email),
        password_hash="$argon2id$placeholder",
    )


class TestInMemoryUserRepository:
    """Tests for the in-memory repository contract."""

    @pytest.mark.asyncio
    async def test_insert_and_find(self):
        """Should find an inserted user by ID and by email."""
        repo = InMemoryUserRepository()
        user = make_user()

        await repo.insert(user)

        assert await repo.find_by_id(user.id) == user
        assert await repo.find_by_email(Email("ANN@example.com")) == user
        assert await repo.exists_by_email(Email("ann@example.com")) is True
        assert await repo.exists_by_email(Email("bob@example.com")) is False

    @pytest.mark.asyncio
    async def test_insert_duplicate_email(self):
        """Should signal a uniqueness violation on the email."""
        repo = InMemoryUserRepository()
        await repo.insert(make_user())

        with pytest.raises(UniquenessViolationError) as exc_info:
            await repo.insert(make_user(email="Ann@Example.com"))

        assert exc_info.value.field == "email"
        assert len(await repo.list_all()) == 1

    @pytest.mark.asyncio
    async def test_update_moves_email_index(self):
        """Should free the old email and claim the new one."""
        repo = InMemoryUserRepository()
        user = await repo.insert(make_user())

        await repo.update(user.model_copy(update={"email": Email("new@example.com")}))

        assert await repo.find_by_email(Email("ann@example.com")) is None
        assert (await repo.find_by_email(Email("new@example.com"))).id == user.id

    @pytest.mark.asyncio
    async def test_update_keeps_created_at(self):
        """Should never rewrite created_at."""
        repo = InMemoryUserRepository()
        user = await repo.insert(make_user())

        saved = await repo.update(
            user.model_copy(update={"created_at": user.created_at - timedelta(days=1)})
        )

        assert saved.created_at == user.created_at

    @pytest.mark.asyncio
    async def test_update_to_taken_email(self):
        """Should refuse to give one user another user's email."""
        repo = InMemoryUserRepository()
        await repo.insert(make_user())
        bob = await repo.insert(make_user(email="bob@example.com", first_name="Bob"))

        with pytest.raises(UniquenessViolationError):
            await repo.update(bob.model_copy(update={"email": Email("ann@example.com")}))

        assert (await repo.find_by_id(bob.id)).email == Email("bob@example.com")

    @pytest.mark.asyncio
    async def test_update_and_remove_missing(self):
        """Should raise NotFoundError for unknown users."""
        repo = InMemoryUserRepository()
        ghost = make_user()

        with pytest.raises(NotFoundError):
            await repo.update(ghost)
        with pytest.raises(NotFoundError):
            await repo.remove(ghost.id)

    @pytest.mark.asyncio
    async def test_remove(self):
        """Should delete the user and release the email."""
        repo = InMemoryUserRepository()
        user = await repo.insert(make_user())

        await repo.remove(user.id)

        assert await repo.find_by_id(user.id) is None
        assert await repo.exists_by_email(user.email) is False
        assert await repo.list_all() == []
