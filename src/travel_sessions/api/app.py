"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from travel_sessions.api.errors import register_error_handlers
from travel_sessions.api.middleware import (
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from travel_sessions.api.sessions import router as sessions_router
from travel_sessions.app_logging import configure_logging
from travel_sessions.config import parse_cors_origins, resolve_log_level
from travel_sessions.containers import AppContainer
from travel_sessions.domain.sessions import to_iso_timestamp


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    settings = container.settings
    configure_logging(resolve_log_level(settings.log_level))
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting travel sessions API (%s)", settings.environment)
        yield
        logger.info("Shutting down travel sessions API")
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    # Added last runs first.
    app.add_middleware(RequestLoggingMiddleware, production=settings.is_production)
    app.add_middleware(GZipMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(settings.cors_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SecurityHeadersMiddleware, enable_hsts=settings.is_production
    )

    register_error_handlers(app)
    app.include_router(sessions_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {
            "status": "ok",
            "environment": settings.environment,
            "timestamp": to_iso_timestamp(datetime.now(tz=UTC)),
        }

    return app
