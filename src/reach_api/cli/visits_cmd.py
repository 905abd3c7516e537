"""Visit CLI commands for adding, listing, deleting and exporting map pins."""

import asyncio
import json
import uuid
from pathlib import Path

import typer

from reach_api.lib.outreach import AnswerStatus, ResidenceType, ResponseType

visits_app = typer.Typer()


@visits_app.command("add")
def visits_add(
    latitude: float = typer.Option(..., "--lat", help="Latitude in degrees"),
    longitude: float = typer.Option(..., "--lon", help="Longitude in degrees"),
    residence_type: ResidenceType = typer.Option(ResidenceType.HOUSE, "--residence-type", help="Residence type"),
    answer_status: AnswerStatus = typer.Option(AnswerStatus.ANSWERED, "--answer-status", help="Answer status"),
    response_type: ResponseType = typer.Option(ResponseType.POSITIVE, "--response-type", help="Response type"),
    notes: str | None = typer.Option(None, "--notes", help="Optional notes"),
) -> None:
    """Record a visit at a location."""
    asyncio.run(_visits_add(latitude, longitude, residence_type, answer_status, response_type, notes))


async def _visits_add(
    latitude: float,
    longitude: float,
    residence_type: ResidenceType,
    answer_status: AnswerStatus,
    response_type: ResponseType,
    notes: str | None,
) -> None:
    """Async implementation of visits add."""
    from reach_api.core.config import get_settings
    from reach_api.core.database import dispose_engine, get_session_factory, init_engine
    from reach_api.lib.outreach import VisitRecord
    from reach_api.services.visit_service import create_visit

    try:
        record = VisitRecord.create(latitude, longitude, residence_type, answer_status, response_type, notes)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    settings = get_settings()
    init_engine(settings.database_url)
    try:
        factory = get_session_factory()
        async with factory() as session:
            visit = await create_visit(session, record)
            typer.echo(f"Visit recorded: {visit.id}")
    finally:
        await dispose_engine()


@visits_app.command("list")
def visits_list() -> None:
    """List all visits, most recent first."""
    asyncio.run(_visits_list())


async def _visits_list() -> None:
    """Async implementation of visits list."""
    from reach_api.core.config import get_settings
    from reach_api.core.database import dispose_engine, get_session_factory, init_engine
    from reach_api.services.visit_service import list_visit_records

    settings = get_settings()
    init_engine(settings.database_url)
    try:
        factory = get_session_factory()
        async with factory() as session:
            records = await list_visit_records(session)
    finally:
        await dispose_engine()

    if not records:
        typer.echo("No visits recorded.")
        return

    for record in records:
        outcome = record.answer_status.label
        if record.is_answered:
            outcome = f"{outcome} / {record.response_type.label}"
        typer.echo(
            f"{record.id}  {record.timestamp.isoformat(timespec='seconds')}  "
            f"{record.residence_type.label:<14} {outcome}  "
            f"({record.latitude:.6f}, {record.longitude:.6f})"
        )
    typer.echo(f"\nTotal: {len(records)}")


@visits_app.command("delete")
def visits_delete(
    visit_id: uuid.UUID = typer.Argument(..., help="Visit ID to delete"),
) -> None:
    """Delete a visit."""
    asyncio.run(_visits_delete(visit_id))


async def _visits_delete(visit_id: uuid.UUID) -> None:
    """Async implementation of visits delete."""
    from reach_api.core.config import get_settings
    from reach_api.core.database import dispose_engine, get_session_factory, init_engine
    from reach_api.services.visit_service import delete_visit

    settings = get_settings()
    init_engine(settings.database_url)
    try:
        factory = get_session_factory()
        async with factory() as session:
            deleted = await delete_visit(session, visit_id)
    finally:
        await dispose_engine()

    if not deleted:
        typer.echo(f"Visit {visit_id} not found.", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Visit {visit_id} deleted.")


@visits_app.command("export")
def visits_export(
    output: Path | None = typer.Option(None, "--output", help="Output GeoJSON file"),
) -> None:
    """Export all visits as a GeoJSON map layer."""
    asyncio.run(_visits_export(output))


async def _visits_export(output: Path | None) -> None:
    """Async implementation of visits export."""
    from reach_api.core.config import get_settings
    from reach_api.core.database import dispose_engine, get_session_factory, init_engine
    from reach_api.lib.outreach import to_feature_collection
    from reach_api.services.visit_service import list_visit_records

    settings = get_settings()
    output_path = output or Path(settings.export_dir) / "visits.geojson"

    init_engine(settings.database_url)
    try:
        factory = get_session_factory()
        async with factory() as session:
            records = await list_visit_records(session)
    finally:
        await dispose_engine()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(to_feature_collection(records), ensure_ascii=False), encoding="utf-8")
    typer.echo(f"Exported {len(records)} visits to {output_path}")
