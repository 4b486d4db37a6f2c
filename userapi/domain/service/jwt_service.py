"""JWT token domain service."""

from uuid import UUID

import logfire

from userapi.config import AuthSettings
from userapi.domain.model import User
from userapi.domain.value import UserId
from userapi.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations.

    Tokens are stateless: there is no revocation list, so a token stays
    valid until it expires even if the user changes password or is deleted.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create JWT token for user.

        Args:
            user: Authenticated user

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user.id)):
            token = create_token(str(user.id), user.email.root, self.auth_settings)
            logfire.info("JWT token created", user_id=str(user.id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", user_id=payload.sub)
                return payload
            except JWTError as e:
                logfire.info("JWT token verification failed", error=str(e))
                raise

    def validate(self, token: str | None) -> tuple[UserId | None, bool]:
        """Validate a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            ``(user_id, True)`` for a valid token, ``(None, False)`` for a
            missing, malformed, tampered or expired one
        """
        if not token:
            return None, False

        try:
            payload = self.verify_token(token)
            return UserId(UUID(payload.sub)), True
        except (JWTError, ValueError):
            return None, False
