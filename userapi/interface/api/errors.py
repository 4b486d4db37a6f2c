"""Exception handlers mapping errors to HTTP responses.

This is the single place where business failures are logged. Client
errors are logged as warnings, storage failures as errors.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from userapi.domain.error import (
    ConflictError,
    DomainError,
    InvalidCredentialsError,
    NotFoundError,
    TransientError,
    ValidationError,
)
from userapi.interface.error import AuthenticationRequiredError

STATUS_BY_ERROR: dict[type[Exception], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    AuthenticationRequiredError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    TransientError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(error: Exception) -> int:
    """Pick the status code for an error, walking its class hierarchy."""
    for cls in type(error).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_error(request: Request, exc: Exception) -> JSONResponse:
    """Render an error as ``{"message": ...}`` and log it once."""
    status_code = status_for(exc)
    attributes = {
        "method": request.method,
        "path": request.url.path,
        "status_code": status_code,
        "error_type": type(exc).__name__,
    }
    headers = None
    if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
        logfire.error("Request failed: {error}", error=str(exc), **attributes)
        message = "Service temporarily unavailable, please retry"
        headers = {"Retry-After": "1"}
    elif status_code >= 500:
        logfire.error("Request failed: {error}", error=str(exc), **attributes)
        message = "Internal server error"
    else:
        logfire.warn("Request rejected: {error}", error=str(exc), **attributes)
        message = str(exc)

    return JSONResponse(
        status_code=status_code, content={"message": message}, headers=headers
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers for domain and interface errors on an app."""
    app.add_exception_handler(DomainError, handle_error)
    app.add_exception_handler(AuthenticationRequiredError, handle_error)
