"""Dashboard snapshot composition and map-layer rendering."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, tzinfo
from typing import Any

from reach_api.lib.outreach.series import daily_visit_series
from reach_api.lib.outreach.stats import breakdown_by_residence_type, compute_stats, marker_style
from reach_api.lib.outreach.timeframe import filter_by_timeframe
from reach_api.lib.outreach.types import DashboardSnapshot, Timeframe, VisitRecord


def build_dashboard(
    records: Iterable[VisitRecord],
    timeframe: Timeframe,
    now: datetime,
    tz: tzinfo | None = None,
) -> DashboardSnapshot:
    """Filter records to a timeframe and compute every dashboard view over them.

    Args:
        records: Full record set from the store.
        timeframe: Reporting window.
        now: Reference instant for the window.
        tz: Calendar timezone, host local when None.

    Returns:
        DashboardSnapshot with stats, residence breakdown and daily series.
    """
    timeframe = Timeframe(timeframe)
    selected = filter_by_timeframe(records, timeframe, now, tz)
    return DashboardSnapshot(
        timeframe=timeframe,
        generated_at=now,
        stats=compute_stats(selected),
        residence_breakdown=breakdown_by_residence_type(selected),
        daily_series=daily_visit_series(selected, tz),
    )


def to_feature(record: VisitRecord) -> dict[str, Any]:
    """Render one visit as a GeoJSON Point feature with simplestyle marker properties."""
    style = marker_style(record)
    return {
        "type": "Feature",
        "geometry": {
            "type": "Point",
            "coordinates": [record.longitude, record.latitude],
        },
        "properties": {
            "id": str(record.id),
            "residence_type": record.residence_type.value,
            "answer_status": record.answer_status.value,
            "response_type": record.response_type.value if record.is_answered else None,
            "timestamp": record.timestamp.isoformat(),
            "notes": record.notes,
            "marker-symbol": style.symbol,
            "marker-color": style.color,
        },
    }


def to_feature_collection(records: Iterable[VisitRecord]) -> dict[str, Any]:
    """Render visits as a GeoJSON FeatureCollection, preserving input order."""
    return {
        "type": "FeatureCollection",
        "features": [to_feature(record) for record in records],
    }
