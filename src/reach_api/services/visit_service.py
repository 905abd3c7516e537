"""Visit service: the record store for outreach visits.

Inserts, deletes and queries persisted visits and converts rows to
immutable ``VisitRecord`` snapshots for the aggregation library.
"""

import uuid
from datetime import UTC

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from reach_api.lib.outreach import AnswerStatus, ResidenceType, ResponseType, VisitRecord
from reach_api.models.visit import Visit


def visit_to_record(visit: Visit) -> VisitRecord:
    """Convert a persisted visit to a VisitRecord.

    Unknown enum values decode to each field's fallback member. Naive
    timestamps (SQLite drops the offset) are read as UTC.

    Args:
        visit: The ORM row.

    Returns:
        The equivalent VisitRecord.
    """
    timestamp = visit.timestamp
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return VisitRecord(
        id=visit.id,
        latitude=visit.latitude,
        longitude=visit.longitude,
        residence_type=ResidenceType(visit.residence_type),
        answer_status=AnswerStatus(visit.answer_status),
        response_type=ResponseType(visit.response_type),
        timestamp=timestamp,
        notes=visit.notes,
    )


async def create_visit(session: AsyncSession, record: VisitRecord) -> Visit:
    """Persist a new visit.

    Args:
        session: Database session.
        record: The record to insert. Its id and timestamp are kept as-is.

    Returns:
        The created Visit.

    Raises:
        ValueError: If a visit with the same id already exists.
    """
    visit = Visit(
        id=record.id,
        latitude=record.latitude,
        longitude=record.longitude,
        residence_type=record.residence_type.value,
        answer_status=record.answer_status.value,
        response_type=record.response_type.value,
        timestamp=record.timestamp.astimezone(UTC),
        notes=record.notes,
    )
    session.add(visit)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        msg = f"Visit {record.id} already exists"
        raise ValueError(msg) from None
    await session.refresh(visit)
    logger.info(
        f"Created visit {visit.id} ({visit.residence_type}, {visit.answer_status}) "
        f"at ({visit.latitude:.6f}, {visit.longitude:.6f})"
    )
    return visit


async def get_visit(session: AsyncSession, visit_id: uuid.UUID) -> Visit | None:
    """Return a visit by id, or None if it does not exist."""
    return await session.get(Visit, visit_id)


async def delete_visit(session: AsyncSession, visit_id: uuid.UUID) -> bool:
    """Delete a visit.

    Args:
        session: Database session.
        visit_id: Id of the visit to delete.

    Returns:
        True if a visit was deleted, False if none matched.
    """
    visit = await session.get(Visit, visit_id)
    if visit is None:
        logger.debug(f"Visit {visit_id} not found, nothing to delete")
        return False
    await session.delete(visit)
    await session.commit()
    logger.info(f"Deleted visit {visit_id}")
    return True


async def list_visits(session: AsyncSession) -> list[Visit]:
    """Return all visits, most recent first."""
    result = await session.execute(select(Visit).order_by(Visit.timestamp.desc()))
    visits = list(result.scalars().all())
    logger.debug(f"Listed {len(visits)} visits")
    return visits


async def list_visit_records(session: AsyncSession) -> list[VisitRecord]:
    """Return all visits as VisitRecord snapshots, most recent first."""
    return [visit_to_record(visit) for visit in await list_visits(session)]
