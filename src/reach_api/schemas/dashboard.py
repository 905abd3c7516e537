"""Pydantic v2 schemas for the dashboard and analytics views."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from reach_api.lib.outreach import DashboardSnapshot, ResidenceType, Timeframe
from reach_api.schemas.session import SessionUserResponse


class DashboardStatsResponse(BaseModel):
    """Summary counts and derived rates."""

    total_visits: int
    answered: int
    no_answer: int
    positive: int
    negative: int
    response_rate: float = Field(description="answered / total_visits, 0 when there are no visits")
    positive_rate: float = Field(description="positive / answered, 0 when nothing was answered")


class ResidenceTypeCountResponse(BaseModel):
    """Visit count for one residence type."""

    residence_type: ResidenceType
    label: str
    count: int


class DailyCountResponse(BaseModel):
    """Visit count for one calendar day."""

    day: date
    count: int


class DashboardResponse(BaseModel):
    """Dashboard snapshot for one timeframe."""

    timeframe: Timeframe
    generated_at: datetime
    stats: DashboardStatsResponse
    residence_breakdown: list[ResidenceTypeCountResponse]
    daily_series: list[DailyCountResponse]
    user: SessionUserResponse | None = None

    @classmethod
    def from_snapshot(
        cls,
        snapshot: DashboardSnapshot,
        user: SessionUserResponse | None = None,
    ) -> "DashboardResponse":
        """Build the response from a library snapshot."""
        stats = snapshot.stats
        return cls(
            timeframe=snapshot.timeframe,
            generated_at=snapshot.generated_at,
            stats=DashboardStatsResponse(
                total_visits=stats.total_visits,
                answered=stats.answered,
                no_answer=stats.no_answer,
                positive=stats.positive,
                negative=stats.negative,
                response_rate=stats.response_rate,
                positive_rate=stats.positive_rate,
            ),
            residence_breakdown=[
                ResidenceTypeCountResponse(
                    residence_type=entry.residence_type,
                    label=entry.residence_type.label,
                    count=entry.count,
                )
                for entry in snapshot.residence_breakdown
            ],
            daily_series=[DailyCountResponse(day=entry.day, count=entry.count) for entry in snapshot.daily_series],
            user=user,
        )
