"""Daily visit time series for trend charts."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from datetime import tzinfo

from reach_api.lib.outreach.timeframe import to_local
from reach_api.lib.outreach.types import DailyCount, VisitRecord


def daily_visit_series(records: Iterable[VisitRecord], tz: tzinfo | None = None) -> list[DailyCount]:
    """Bucket visits by local calendar day.

    The series is sparse: only days with at least one visit appear.

    Args:
        records: Records in any order.
        tz: Calendar timezone, host local when None.

    Returns:
        DailyCount entries sorted by day ascending, one per distinct day.
    """
    counts = Counter(to_local(record.timestamp, tz).date() for record in records)
    return [DailyCount(day, counts[day]) for day in sorted(counts)]
