"""Root API router with /api/v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from reach_api.api.middleware import RequestLoggingMiddleware, setup_cors
from reach_api.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from reach_api.api.v1.dashboard import dashboard_router
    from reach_api.api.v1.session import session_router
    from reach_api.api.v1.visits import visits_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(session_router)
    root_router.include_router(visits_router)
    root_router.include_router(dashboard_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    setup_cors(app, settings)
    app.add_middleware(RequestLoggingMiddleware)
