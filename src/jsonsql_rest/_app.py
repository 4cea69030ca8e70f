"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ._config import Settings, engine_options
from ._connections import DEFAULT_CONNECTION, ConnectionRegistry
from ._errors import register_error_handlers
from ._routes import _health, _query


def create_app(
    registry: ConnectionRegistry,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        yield
        registry.dispose()

    app = FastAPI(
        title="jsonsql REST API",
        description="Execute JSON-encoded SQL statements over HTTP",
        lifespan=lifespan,
    )

    app.dependency_overrides[_query.get_registry] = lambda: registry

    # CORS (consumer configurable)
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_error_handlers(app)

    app.include_router(_health.router)
    app.include_router(_query.router)

    return app


def create_app_from_settings(settings: Settings) -> FastAPI:
    """Build the registry from ``settings`` and create the application."""
    if not settings.database_url:
        raise RuntimeError("DATABASE_URL is not set.")

    registry = ConnectionRegistry()
    registry.register_url(
        DEFAULT_CONNECTION, settings.database_url, **engine_options(settings)
    )
    return create_app(registry, cors_origins=settings.cors_origins or None)
