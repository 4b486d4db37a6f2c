"""Integration tests for PostgresUserRepository.

Run with ``pytest -m integration`` against a database at DATABASE__URL.
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from userapi.domain.error import NotFoundError, UniquenessViolationError
from userapi.domain.model import User
from userapi.domain.repository import UserRepository
from userapi.domain.value import Email, UserId
from userapi.persistence.tables import metadata, users_table
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def repo(integration_env) -> UserRepository:
    """Empty users table and a repository bound to the request session."""
    engine = await integration_env.get(AsyncEngine)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        await conn.execute(users_table.delete())
    return await integration_env.get(UserRepository)


def make_user(email: str = "ann@example.com") -> User:
    now = datetime.now(timezone.utc)
    return User(
        id=UserId(uuid4()),
        first_name="Ann",
        email=Email(email),
        password_hash="$argon2id$placeholder",
        created_at=now,
        updated_at=now,
    )


class TestPostgresUserRepository:
    """Integration tests for the PostgreSQL repository."""

    @pytest.mark.asyncio
    async def test_insert_and_find(self, repo):
        """Should round-trip a user through the users table."""
        user = await repo.insert(make_user())

        found = await repo.find_by_email(Email("ANN@example.com"))

        assert found is not None
        assert found.id == user.id
        assert found.email == user.email
        assert await repo.exists_by_email(user.email) is True

    @pytest.mark.asyncio
    async def test_duplicate_email_keeps_session_usable(self, repo):
        """Should map the unique constraint and roll back only the failed insert."""
        user = await repo.insert(make_user())

        with pytest.raises(UniquenessViolationError) as exc_info:
            await repo.insert(make_user())

        assert exc_info.value.field == "email"
        assert [u.id for u in await repo.list_all()] == [user.id]

    @pytest.mark.asyncio
    async def test_update_and_remove(self, repo):
        """Should update fields and then delete the row."""
        user = await repo.insert(make_user())

        await repo.update(user.model_copy(update={"first_name": "Anna"}))
        assert (await repo.find_by_id(user.id)).first_name == "Anna"

        await repo.remove(user.id)
        assert await repo.find_by_id(user.id) is None

    @pytest.mark.asyncio
    async def test_missing_user(self, repo):
        """Should raise NotFoundError when no row matches."""
        ghost = make_user()

        with pytest.raises(NotFoundError):
            await repo.update(ghost)
        with pytest.raises(NotFoundError):
            await repo.remove(ghost.id)
