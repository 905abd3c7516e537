"""Dashboard API endpoint for outreach statistics."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from reach_api.core.config import Settings, get_settings
from reach_api.core.dependencies import get_async_session, get_session_manager
from reach_api.core.session import SessionManager
from reach_api.lib.outreach import Timeframe
from reach_api.schemas.dashboard import DashboardResponse
from reach_api.schemas.session import SessionUserResponse
from reach_api.services.dashboard_service import get_dashboard

dashboard_router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@dashboard_router.get("")
async def dashboard(
    session: Annotated[AsyncSession, Depends(get_async_session)],
    settings: Annotated[Settings, Depends(get_settings)],
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
    timeframe: Annotated[Timeframe, Query(description="Reporting window")] = Timeframe.ALL,
) -> DashboardResponse:
    """Recompute visit statistics for a reporting window.

    The ``user`` block is only present when someone is logged in and is
    purely informational.
    """
    snapshot = await get_dashboard(session, timeframe, tz=settings.calendar_tz)
    user = session_manager.current_user
    return DashboardResponse.from_snapshot(
        snapshot,
        user=SessionUserResponse.model_validate(user) if user is not None else None,
    )
