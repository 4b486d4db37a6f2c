"""Unit tests for HTTP error mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from userapi.domain.error import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    TransientError,
    UniquenessViolationError,
    ValidationError,
)
from userapi.interface.api.errors import register_exception_handlers, status_for
from userapi.interface.error import AuthenticationRequiredError


@pytest.mark.parametrize(
    "error,status_code",
    [
        (ValidationError("bad"), 400),
        (InvalidCredentialsError(), 401),
        (AuthenticationRequiredError(), 401),
        (NotFoundError("User", "42"), 404),
        (ConflictError("taken"), 409),
        (TransientError("db down"), 503),
        (UniquenessViolationError("email", "a@example.com"), 500),
    ],
)
def test_status_for(error, status_code):
    """Should map each error kind to its status code."""
    assert status_for(error) == status_code


class TestExceptionHandlers:
    """Tests for the registered handlers."""

    @pytest.fixture
    def client(self) -> TestClient:
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/conflict")
        async def conflict():
            raise ConflictError("Email 'ann@example.com' is already taken")

        @app.get("/transient")
        async def transient():
            raise TransientError("User storage unavailable during insert")

        return TestClient(app)

    def test_client_error_body(self, client):
        """Should return the error message as the body."""
        response = client.get("/conflict")

        assert response.status_code == 409
        assert response.json() == {"message": "Email 'ann@example.com' is already taken"}

    def test_transient_error_hides_detail(self, client):
        """Should answer 503 with a retry hint and no internal detail."""
        response = client.get("/transient")

        assert response.status_code == 503
        assert response.headers["retry-after"] == "1"
        assert "storage" not in response.json()["message"]
