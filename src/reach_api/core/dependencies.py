"""FastAPI dependency injection for database sessions, settings and the login session."""

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from reach_api.core.database import get_session_factory
from reach_api.core.session import SessionManager


async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Yield an async database session with per-request lifecycle."""
    factory = get_session_factory()
    async with factory() as session:
        yield session


def get_session_manager(request: Request) -> SessionManager:
    """Return the application's login session manager.

    Falls back to a fresh manager on the app state when none was installed
    (e.g. routers mounted on a bare test app).
    """
    manager = getattr(request.app.state, "session_manager", None)
    if manager is None:
        manager = SessionManager()
        request.app.state.session_manager = manager
    return manager
