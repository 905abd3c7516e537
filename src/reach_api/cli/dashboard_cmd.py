"""Dashboard CLI command printing outreach statistics."""

import asyncio

import typer

from reach_api.lib.outreach import DashboardSnapshot, Timeframe

dashboard_app = typer.Typer()


@dashboard_app.command("show")
def dashboard_show(
    timeframe: Timeframe = typer.Option(Timeframe.ALL, "--timeframe", help="Reporting window"),
) -> None:
    """Print visit statistics for a reporting window."""
    asyncio.run(_dashboard_show(timeframe))


async def _dashboard_show(timeframe: Timeframe) -> None:
    """Async implementation of dashboard show."""
    from reach_api.core.config import get_settings
    from reach_api.core.database import dispose_engine, get_session_factory, init_engine
    from reach_api.services.dashboard_service import get_dashboard

    settings = get_settings()
    init_engine(settings.database_url)
    try:
        factory = get_session_factory()
        async with factory() as session:
            snapshot = await get_dashboard(session, timeframe, tz=settings.calendar_tz)
    finally:
        await dispose_engine()

    _print_snapshot(snapshot)


def _print_snapshot(snapshot: DashboardSnapshot) -> None:
    stats = snapshot.stats
    typer.echo(f"Outreach summary ({snapshot.timeframe.value}):")
    typer.echo(f"  Total visits:   {stats.total_visits}")
    typer.echo(f"  Answered:       {stats.answered}")
    typer.echo(f"  No answer:      {stats.no_answer}")
    typer.echo(f"  Positive:       {stats.positive}")
    typer.echo(f"  Negative:       {stats.negative}")
    typer.echo(f"  Response rate:  {stats.response_rate:.0%}")
    typer.echo(f"  Positive rate:  {stats.positive_rate:.0%}")

    typer.echo("\nBy residence type:")
    for entry in snapshot.residence_breakdown:
        typer.echo(f"  {entry.residence_type.label:<14} {entry.count}")

    if snapshot.daily_series:
        typer.echo("\nVisits per day:")
        for entry in snapshot.daily_series:
            typer.echo(f"  {entry.day.isoformat()}  {entry.count}")
