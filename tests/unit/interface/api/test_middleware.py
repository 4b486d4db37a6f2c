"""Unit tests for AuthenticationMiddleware and require_user_id."""

from uuid import uuid4

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from userapi.domain.model import User
from userapi.domain.value import Email, UserId
from userapi.interface.api.errors import register_exception_handlers
from userapi.interface.api.middleware import (
    AuthenticationMiddleware,
    current_user_id,
    parse_bearer_token,
    require_user_id,
)


def build_app(jwt_service) -> FastAPI:
    app = FastAPI()
    app.add_middleware(AuthenticationMiddleware, jwt_service=jwt_service)
    register_exception_handlers(app)

    @app.get("/whoami")
    async def whoami(request: Request):
        state_id = request.state.user_id
        context_id = current_user_id.get()
        return {
            "state": str(state_id) if state_id else None,
            "context": str(context_id) if context_id else None,
        }

    @app.get("/private")
    async def private(user_id: UserId = Depends(require_user_id)):
        return {"user_id": str(user_id)}

    return app


@pytest.fixture
def user() -> User:
    return User(
        id=UserId(uuid4()),
        first_name="Ann",
        email=Email("ann@example.com"),
        password_hash="$argon2id$placeholder",
    )


@pytest.fixture
def client(jwt_service) -> TestClient:
    return TestClient(build_app(jwt_service))


class TestParseBearerToken:
    """Tests for parse_bearer_token()."""

    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("bearer abc", "abc"),
            ("  Bearer   abc  ", "abc"),
            ("Basic dXNlcjpwYXNz", None),
            ("Bearer", None),
            ("Bearer ", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parse(self, header, expected):
        """Should only accept the Bearer scheme with a non-empty token."""
        assert parse_bearer_token(header) == expected


class TestAuthenticationMiddleware:
    """Tests for identity resolution per request."""

    def test_no_header_is_unauthenticated(self, client):
        """Should let the request through without an identity."""
        response = client.get("/whoami")

        assert response.status_code == 200
        assert response.json() == {"state": None, "context": None}

    def test_valid_token_sets_identity(self, client, jwt_service, user):
        """Should expose the user ID on request state and the context variable."""
        token = jwt_service.create_token(user)

        response = client.get("/whoami", headers={"Authorization": f"Bearer {token}"})

        assert response.json() == {"state": str(user.id), "context": str(user.id)}

    @pytest.mark.parametrize(
        "header", ["Bearer not-a-token", "Basic dXNlcjpwYXNz", "Bearer a.b.c"]
    )
    def test_bad_credentials_never_rejected(self, client, header):
        """Should treat an invalid token as no token at all."""
        response = client.get("/whoami", headers={"Authorization": header})

        assert response.status_code == 200
        assert response.json() == {"state": None, "context": None}


class TestRequireUserId:
    """Tests for the protected-route dependency."""

    def test_missing_identity_is_401(self, client):
        """Should answer 401 with a message body."""
        response = client.get("/private")

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized"}

    def test_identity_present(self, client, jwt_service, user):
        """Should hand the caller's ID to the route."""
        token = jwt_service.create_token(user)

        response = client.get("/private", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json() == {"user_id": str(user.id)}
