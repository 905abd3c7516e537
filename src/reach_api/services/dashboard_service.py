"""Dashboard service: recompute outreach statistics from the record store."""

from datetime import UTC, datetime, tzinfo

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from reach_api.lib.outreach import DashboardSnapshot, Timeframe, build_dashboard
from reach_api.services.visit_service import list_visit_records


async def get_dashboard(
    session: AsyncSession,
    timeframe: Timeframe,
    *,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> DashboardSnapshot:
    """Query every visit and build the dashboard for a timeframe.

    Stats are always recomputed from a fresh read of the full store.

    Args:
        session: Database session.
        timeframe: Reporting window.
        now: Reference instant, defaults to the current time.
        tz: Calendar timezone, host local when None.

    Returns:
        DashboardSnapshot for the selected window.
    """
    records = await list_visit_records(session)
    reference = now if now is not None else datetime.now(UTC)
    snapshot = build_dashboard(records, timeframe, reference, tz)
    logger.info(
        f"Dashboard for timeframe={snapshot.timeframe}: "
        f"{snapshot.stats.total_visits} of {len(records)} visits selected"
    )
    return snapshot
