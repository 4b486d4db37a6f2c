"""Test configuration and fixtures."""

import os

TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-for-hs256"

# Cheap Argon2 parameters and test environment for every container built in tests
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", TEST_JWT_SECRET)
os.environ.setdefault("PASSWORD__TIME_COST", "1")
os.environ.setdefault("PASSWORD__MEMORY_COST", "8192")
os.environ.setdefault("PASSWORD__PARALLELISM", "1")

import logfire  # noqa: E402
import pytest  # noqa: E402

from userapi.adapter.email import MockNotifier  # noqa: E402
from userapi.config import AuthSettings, PasswordSettings  # noqa: E402
from userapi.domain.service import (  # noqa: E402
    JWTService,
    PasswordService,
    UserIdentityService,
)
from userapi.persistence.repository.inmemory import InMemoryUserRepository  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(jwt_secret=TEST_JWT_SECRET)


@pytest.fixture
def password_service() -> PasswordService:
    return PasswordService(
        PasswordSettings(time_cost=1, memory_cost=8192, parallelism=1)
    )


@pytest.fixture
def jwt_service(auth_settings) -> JWTService:
    return JWTService(auth_settings)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def notifier() -> MockNotifier:
    return MockNotifier()


@pytest.fixture
def user_identity_service(
    user_repository, password_service, jwt_service, notifier
) -> UserIdentityService:
    """Identity service wired to in-memory storage and a recording notifier."""
    return UserIdentityService(
        user_repository=user_repository,
        password_service=password_service,
        jwt_service=jwt_service,
        notifier=notifier,
    )
