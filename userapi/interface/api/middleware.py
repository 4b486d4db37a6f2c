"""Bearer token authentication middleware.

The middleware only identifies the caller. It never rejects a request:
routes that need an identity depend on :func:`require_user_id`.
"""

from contextvars import ContextVar

from dishka import AsyncContainer
from fastapi import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from userapi.domain.service import JWTService
from userapi.domain.value import UserId
from userapi.interface.error import AuthenticationRequiredError

current_user_id: ContextVar[UserId | None] = ContextVar("current_user_id", default=None)


def parse_bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization`` header value.

    Returns None when the header is absent, empty or uses another scheme.
    """
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


class AuthenticationMiddleware:
    """Resolve the bearer token of each HTTP request to a user ID.

    On success the ID is stored in ``request.state.user_id`` and in the
    ``current_user_id`` context variable for the rest of the request.
    Otherwise both are None.
    """

    def __init__(self, app: ASGIApp, jwt_service: JWTService | None = None) -> None:
        """Initialize middleware.

        Args:
            app: Wrapped ASGI application
            jwt_service: Token service; resolved from the app's DI container
                on first use when not given
        """
        self.app = app
        self.jwt_service = jwt_service

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        user_id = None
        token = parse_bearer_token(request.headers.get("authorization"))
        if token:
            jwt_service = await self._get_jwt_service(request)
            user_id, _ = jwt_service.validate(token)

        request.state.user_id = user_id
        context_token = current_user_id.set(user_id)
        try:
            await self.app(scope, receive, send)
        finally:
            current_user_id.reset(context_token)

    async def _get_jwt_service(self, request: Request) -> JWTService:
        if self.jwt_service is None:
            container: AsyncContainer = request.app.state.dishka_container
            self.jwt_service = await container.get(JWTService)
        return self.jwt_service


def require_user_id(request: Request) -> UserId:
    """Dependency for protected routes.

    Returns:
        ID of the authenticated caller

    Raises:
        AuthenticationRequiredError: If the request carries no valid token
    """
    user_id = getattr(request.state, "user_id", None)
    if user_id is None:
        raise AuthenticationRequiredError()
    return user_id
