"""Pydantic v2 schemas for visit operations."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from reach_api.lib.outreach import AnswerStatus, ResidenceType, ResponseType, lookup_member


class VisitCreateRequest(BaseModel):
    """Request body for dropping a new pin."""

    latitude: float = Field(ge=-90, le=90, description="Latitude in degrees")
    longitude: float = Field(ge=-180, le=180, description="Longitude in degrees")
    residence_type: ResidenceType
    answer_status: AnswerStatus
    response_type: ResponseType = Field(
        default=ResponseType.POSITIVE,
        description="Outcome sentiment; stored for every visit but only counted when answered",
    )
    notes: str | None = Field(default=None, max_length=2000)

    @field_validator("residence_type", "answer_status", "response_type", mode="before")
    @classmethod
    def require_known_member(cls, v: object, info: ValidationInfo) -> object:
        """Reject unknown values instead of applying the stored-row fallback."""
        enum_cls = cls.model_fields[info.field_name].annotation
        member = lookup_member(enum_cls, v)
        if member is None:
            allowed = ", ".join(m.value for m in enum_cls)
            msg = f"Unknown {info.field_name} {v!r}; expected one of: {allowed}"
            raise ValueError(msg)
        return member


class VisitResponse(BaseModel):
    """A persisted visit."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    latitude: float
    longitude: float
    residence_type: ResidenceType
    answer_status: AnswerStatus
    response_type: ResponseType
    timestamp: datetime
    notes: str | None = None


class VisitListResponse(BaseModel):
    """All visits, most recent first."""

    items: list[VisitResponse]
    total: int
