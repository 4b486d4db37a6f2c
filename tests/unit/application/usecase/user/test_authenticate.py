"""Unit tests for AuthenticateUseCase and RegisterUseCase."""

import pytest

from userapi.application.usecase.user import AuthenticateUseCase, RegisterUseCase
from userapi.application.usecase.user.authenticate import AuthenticateRequest
from userapi.application.usecase.user.register import RegisterRequest
from userapi.domain.error import ConflictError, InvalidCredentialsError


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_confirmation(self, user_identity_service):
        """Should confirm the registration with the standard message."""
        use_case = RegisterUseCase(user_identity_service=user_identity_service)

        response = await use_case.execute(
            RegisterRequest(
                first_name="Ann",
                email="ann@example.com",
                password="Secret1",
                confirm_password="Secret1",
            )
        )

        assert response.message == "Registration successful! Check your email!"

    @pytest.mark.asyncio
    async def test_register_twice(self, user_identity_service):
        """Should propagate the conflict from the domain service."""
        use_case = RegisterUseCase(user_identity_service=user_identity_service)
        request = RegisterRequest(
            first_name="Ann",
            email="ann@example.com",
            password="Secret1",
            confirm_password="Secret1",
        )
        await use_case.execute(request)

        with pytest.raises(ConflictError):
            await use_case.execute(request)


class TestAuthenticateUseCase:
    """Tests for AuthenticateUseCase."""

    @pytest.mark.asyncio
    async def test_login_returns_public_fields_and_token(
        self, user_identity_service, jwt_service
    ):
        """Should return the user without the hash, plus a valid token."""
        # Arrange
        user = await user_identity_service.register(
            first_name="Ann",
            last_name="Lee",
            email="ann@example.com",
            password="Secret1",
            confirm_password="Secret1",
        )
        use_case = AuthenticateUseCase(user_identity_service=user_identity_service)

        # Act
        response = await use_case.execute(
            AuthenticateRequest(
                email="Ann@Example.com", password="Secret1", confirm_password="Secret1"
            )
        )

        # Assert
        assert response.id == str(user.id)
        assert response.first_name == "Ann"
        assert response.last_name == "Lee"
        assert response.email == "ann@example.com"
        assert jwt_service.validate(response.token) == (user.id, True)
        assert "password_hash" not in response.model_dump()

    @pytest.mark.asyncio
    async def test_wrong_password(self, user_identity_service):
        """Should propagate InvalidCredentialsError."""
        use_case = AuthenticateUseCase(user_identity_service=user_identity_service)

        with pytest.raises(InvalidCredentialsError):
            await use_case.execute(
                AuthenticateRequest(
                    email="ann@example.com", password="x", confirm_password="x"
                )
            )
