"""Data types for the outreach library.

Defines the Visit Record, its classification enums, and the fixed-shape
statistics structures produced by the aggregation functions.

Each enum decodes unrecognised values to a documented fallback member
instead of raising, so rows persisted by an older schema always load:

- ``ResidenceType`` falls back to ``OTHER``
- ``AnswerStatus`` falls back to ``NO_ANSWER``
- ``ResponseType`` falls back to ``POSITIVE``
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from enum import StrEnum
from typing import Any, NamedTuple


def _normalize(value: str) -> str:
    return value.strip().lower().replace("-", "_").replace(" ", "_")


def lookup_member(cls: type[StrEnum], value: object) -> Any:
    """Resolve a raw value to a member by value or display label.

    Matching ignores case, surrounding whitespace and ``-``/space vs ``_``.

    Returns:
        The matching member, or None when nothing matches.
    """
    if isinstance(value, cls):
        return value
    if isinstance(value, str):
        key = _normalize(value)
        for member in cls:
            if key in (member.value, _normalize(member.label)):
                return member
    return None


def _decode(cls: type[StrEnum], value: object, fallback: StrEnum) -> Any:
    member = lookup_member(cls, value)
    return fallback if member is None else member


class ResidenceType(StrEnum):
    """Category of dwelling visited."""

    HOUSE = "house"
    APARTMENT = "apartment"
    HOTEL = "hotel"
    DUPLEX = "duplex"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _RESIDENCE_LABELS[self]

    @classmethod
    def _missing_(cls, value: object) -> ResidenceType:
        return _decode(cls, value, cls.OTHER)


class AnswerStatus(StrEnum):
    """Whether contact was made at the residence."""

    ANSWERED = "answered"
    NO_ANSWER = "no_answer"

    @property
    def label(self) -> str:
        return _ANSWER_LABELS[self]

    @classmethod
    def _missing_(cls, value: object) -> AnswerStatus:
        return _decode(cls, value, cls.NO_ANSWER)


class ResponseType(StrEnum):
    """Sentiment of the contact outcome. Only meaningful when answered."""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    @property
    def label(self) -> str:
        return _RESPONSE_LABELS[self]

    @classmethod
    def _missing_(cls, value: object) -> ResponseType:
        return _decode(cls, value, cls.POSITIVE)


class Timeframe(StrEnum):
    """Named reporting window used to filter records before aggregation."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    ALL = "all"


_RESIDENCE_LABELS: dict[ResidenceType, str] = {
    ResidenceType.HOUSE: "House",
    ResidenceType.APARTMENT: "Apartment",
    ResidenceType.HOTEL: "Hotel Housing",
    ResidenceType.DUPLEX: "Duplex",
    ResidenceType.OTHER: "Other",
}

_ANSWER_LABELS: dict[AnswerStatus, str] = {
    AnswerStatus.ANSWERED: "Answer",
    AnswerStatus.NO_ANSWER: "No Answer",
}

_RESPONSE_LABELS: dict[ResponseType, str] = {
    ResponseType.POSITIVE: "Positive Response",
    ResponseType.NEGATIVE: "Negative Response",
}


@dataclass(frozen=True)
class VisitRecord:
    """One logged outreach contact attempt, geotagged and categorized.

    Attributes:
        id: Unique identifier assigned at creation.
        latitude: Latitude in degrees. Must be finite.
        longitude: Longitude in degrees. Must be finite.
        residence_type: Category of dwelling visited.
        answer_status: Whether anyone answered.
        response_type: Outcome sentiment; always populated, read only when answered.
        timestamp: Creation instant.
        notes: Optional free text.
    """

    id: uuid.UUID
    latitude: float
    longitude: float
    residence_type: ResidenceType
    answer_status: AnswerStatus
    response_type: ResponseType
    timestamp: datetime
    notes: str | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.latitude) or not math.isfinite(self.longitude):
            msg = f"Coordinates must be finite, got ({self.latitude}, {self.longitude})"
            raise ValueError(msg)

    @classmethod
    def create(
        cls,
        latitude: float,
        longitude: float,
        residence_type: ResidenceType,
        answer_status: AnswerStatus,
        response_type: ResponseType = ResponseType.POSITIVE,
        notes: str | None = None,
        *,
        timestamp: datetime | None = None,
    ) -> VisitRecord:
        """Build a new record with a fresh id, stamped now unless a timestamp is given.

        Blank notes are stored as ``None``.
        """
        return cls(
            id=uuid.uuid4(),
            latitude=float(latitude),
            longitude=float(longitude),
            residence_type=ResidenceType(residence_type),
            answer_status=AnswerStatus(answer_status),
            response_type=ResponseType(response_type),
            timestamp=timestamp if timestamp is not None else datetime.now(UTC),
            notes=notes if notes and notes.strip() else None,
        )

    @property
    def is_answered(self) -> bool:
        return self.answer_status is AnswerStatus.ANSWERED


@dataclass(frozen=True)
class DashboardStats:
    """Fixed-shape aggregate snapshot consumed by summary views."""

    total_visits: int = 0
    answered: int = 0
    no_answer: int = 0
    positive: int = 0
    negative: int = 0

    @property
    def response_rate(self) -> float:
        """Share of visits that were answered, 0.0 when there are none."""
        if self.total_visits == 0:
            return 0.0
        return self.answered / self.total_visits

    @property
    def positive_rate(self) -> float:
        """Share of answered visits with a positive response, 0.0 when none answered."""
        if self.answered == 0:
            return 0.0
        return self.positive / self.answered


class ResidenceTypeCount(NamedTuple):
    residence_type: ResidenceType
    count: int


class DailyCount(NamedTuple):
    day: date
    count: int


@dataclass(frozen=True)
class MarkerStyle:
    """Map marker appearance for a visit (simplestyle symbol and hex color)."""

    symbol: str
    color: str


@dataclass(frozen=True)
class DashboardSnapshot:
    """Everything the dashboard renders for one timeframe."""

    timeframe: Timeframe
    generated_at: datetime
    stats: DashboardStats
    residence_breakdown: list[ResidenceTypeCount] = field(default_factory=list)
    daily_series: list[DailyCount] = field(default_factory=list)
