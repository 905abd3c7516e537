"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
the login session, and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from reach_api.core.config import get_settings
from reach_api.core.database import dispose_engine, init_engine
from reach_api.core.logging import setup_logging
from reach_api.core.session import SessionManager


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifecycle: init engine on startup, dispose on shutdown."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)
    init_engine(settings.database_url, echo=False)
    logger.info(f"Reach API starting (environment={settings.environment})")

    yield

    await dispose_engine()
    logger.info("Reach API stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Reach API",
        description="Door-to-door outreach visit collection and dashboard analytics",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.session_manager = SessionManager()

    # Register exception handlers
    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc)},
        )

    # Register middleware and routers
    from reach_api.api.router import create_router, setup_middleware

    setup_middleware(app, settings)
    app.include_router(create_router(settings))

    return app
