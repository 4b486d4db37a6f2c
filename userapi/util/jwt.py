"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from userapi.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str
    email: str | None = None
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    email: str,
    settings: AuthSettings,
    now: datetime | None = None,
) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID, stored as the ``sub`` claim
        email: User email
        settings: Authentication settings
        now: Issuance time (defaults to the current UTC time)

    Returns:
        Encoded JWT token
    """
    issued_at = now or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(hours=settings.jwt_expiry_hours)

    payload = {
        "sub": user_id,
        "email": email,
        "iat": issued_at,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    The signature is checked before any claim is read; expiry is checked
    afterwards against the current time.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is malformed, tampered with or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, PydanticValidationError, TypeError):
        raise JWTError("Invalid token")
