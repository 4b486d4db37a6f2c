"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userapi.config import VERSION, Settings
from userapi.interface.api.errors import register_exception_handlers
from userapi.interface.api.middleware import AuthenticationMiddleware
from userapi.interface.api.routes import health, users
from userapi.util.di.container import create_container, setup_di
from userapi.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the DI container (and the database pool) on shutdown."""
    yield
    await app.state.dishka_container.close()


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function.
    ``scripts/start_app.py`` does so in production, ``tests/conftest.py``
    in tests.

    Args:
        container: DI container (defaults to the production container)
        settings: Application settings (defaults to the environment)
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="User API",
        description="User registration, authentication and account management",
        version=VERSION,
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    app_instance.add_middleware(AuthenticationMiddleware)
    # Added last, so it wraps every other middleware
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)

    return app_instance
