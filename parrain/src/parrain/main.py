"""
Main FastAPI application entry point.

Uses Application Factory Pattern.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from parrain.config.settings import Settings, get_settings, override_settings
from parrain.di import initialize_container, shutdown_container
from parrain.domain.exceptions import ParrainException
from parrain.infrastructure.monitoring import get_logger, setup_logging
from parrain.presentation.api.middleware import (
    MetricsMiddleware,
    RequestIDMiddleware,
    parrain_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from parrain.presentation.api.routes import health, leaderboard, users


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing). Installed as
            the process-wide settings so the DI container picks it up.

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()
    else:
        override_settings(settings)

    # Setup structured logging (JSON only in production)
    json_logs = settings.ENV == "production"
    setup_logging(
        level=settings.LOG_LEVEL,
        json_logs=json_logs,
        environment=settings.ENV,
    )
    logger = get_logger(__name__)

    logger.info(f"Creating Parrain application (ENV={settings.ENV})")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Parrain application...")
        await initialize_container()
        logger.info(f"User store ready at {settings.STORE_PATH}")

        yield

        logger.info("Shutting down Parrain application...")
        await shutdown_container()
        logger.info("Parrain application shutdown complete")

    app = FastAPI(
        title="Parrain API",
        description="Wallet-based referral tracking for Lumiere",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )

    # Middleware chain (last added runs first)
    app.add_middleware(RequestIDMiddleware)
    if settings.METRICS_ENABLED:
        app.add_middleware(MetricsMiddleware)
    app.add_middleware(
        GZipMiddleware,
        minimum_size=1000,
        compresslevel=6,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(ParrainException, parrain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Register routes
    app.include_router(health.router, prefix="/api")
    app.include_router(users.router, prefix="/api")
    app.include_router(leaderboard.router, prefix="/api")

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint."""
        return {
            "service": "Parrain",
            "status": "running",
            "version": settings.APP_VERSION,
            "description": "Wallet-based referral tracking",
        }

    if settings.METRICS_ENABLED:

        @app.get("/metrics", tags=["Monitoring"])
        async def metrics():
            """
            Prometheus metrics endpoint.

            Returns metrics in Prometheus text format for scraping.
            """
            return Response(
                content=generate_latest(),
                media_type=CONTENT_TYPE_LATEST,
            )

    logger.info("Parrain application created successfully")
    return app


def get_app() -> FastAPI:
    """
    Get or create application instance (lazy initialization).

    For uvicorn: uvicorn parrain.main:get_app --factory
    """
    return create_app()


def main():
    """Run the application with uvicorn (single worker: one store writer)."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "parrain.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
        workers=1,
    )


if __name__ == "__main__":
    main()
