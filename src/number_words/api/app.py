"""FastAPI application factory."""
from __future__ import annotations
from contextlib import asynccontextmanager
import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ..config import Settings
from ..utils.logging import setup_logging
from .middleware import RequestLoggingMiddleware
from .routes import convert, health

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        logger.info("service_started", default_lang=settings.default_lang,
                    overflow_policy=settings.overflow_policy.value)
        yield

    app = FastAPI(
        title="Number Words API",
        description="Spell numbers out as words in many languages",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store settings in app state
    app.state.settings = settings

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(convert.router, tags=["convert"])

    return app
