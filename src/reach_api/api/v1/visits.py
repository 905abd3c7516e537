"""Visit API endpoints for dropping, listing, mapping and deleting pins."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from reach_api.core.dependencies import get_async_session
from reach_api.lib.outreach import VisitRecord, to_feature_collection
from reach_api.schemas.visit import VisitCreateRequest, VisitListResponse, VisitResponse
from reach_api.services.visit_service import (
    create_visit,
    delete_visit,
    get_visit,
    list_visit_records,
    visit_to_record,
)

visits_router = APIRouter(prefix="/visits", tags=["visits"])


@visits_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
)
async def create_visit_endpoint(
    body: VisitCreateRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> VisitResponse:
    """Record a visit at a location. The id and timestamp are assigned here."""
    record = VisitRecord.create(
        latitude=body.latitude,
        longitude=body.longitude,
        residence_type=body.residence_type,
        answer_status=body.answer_status,
        response_type=body.response_type,
        notes=body.notes,
    )
    try:
        visit = await create_visit(session, record)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return VisitResponse.model_validate(visit_to_record(visit))


@visits_router.get("")
async def list_visits_endpoint(
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> VisitListResponse:
    """List all visits, most recent first."""
    records = await list_visit_records(session)
    return VisitListResponse(
        items=[VisitResponse.model_validate(record) for record in records],
        total=len(records),
    )


@visits_router.get("/map")
async def visits_map_layer(
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> dict:
    """Return all visits as a GeoJSON FeatureCollection with marker styling."""
    records = await list_visit_records(session)
    return to_feature_collection(records)


@visits_router.get("/{visit_id}")
async def get_visit_endpoint(
    visit_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> VisitResponse:
    """Return a single visit."""
    visit = await get_visit(session, visit_id)
    if visit is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Visit not found")
    return VisitResponse.model_validate(visit_to_record(visit))


@visits_router.delete(
    "/{visit_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_visit_endpoint(
    visit_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> Response:
    """Delete a visit. This cannot be undone."""
    deleted = await delete_visit(session, visit_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Visit not found")
    logger.info(f"Visit {visit_id} deleted via API")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
