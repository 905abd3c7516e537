"""Timeframe filter: reduce a record set to a reporting window.

Windows are evaluated against a calendar timezone. Passing ``tz=None``
uses the host's local timezone; naive datetimes are read as local time.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta, tzinfo

from dateutil.relativedelta import relativedelta

from reach_api.lib.outreach.types import Timeframe, VisitRecord

WEEK_SPAN = timedelta(days=7)


def to_local(moment: datetime, tz: tzinfo | None = None) -> datetime:
    """Convert a datetime to an aware datetime in the calendar timezone."""
    return moment.astimezone(tz)


def subtract_month(moment: datetime) -> datetime:
    """Step back one calendar month, clamping the day to the target month's length.

    Args:
        moment: The datetime to step back from.

    Returns:
        The same wall-clock time one month earlier (Mar 31 -> Feb 28/29).
    """
    return moment - relativedelta(months=1)


def timeframe_cutoff(timeframe: Timeframe, now: datetime, tz: tzinfo | None = None) -> datetime | None:
    """Return the earliest instant included by a timeframe.

    ``DAY`` starts at local midnight of ``now``; ``ALL`` has no cutoff.
    """
    local_now = to_local(now, tz)
    if timeframe is Timeframe.DAY:
        return local_now.replace(hour=0, minute=0, second=0, microsecond=0)
    if timeframe is Timeframe.WEEK:
        return local_now - WEEK_SPAN
    if timeframe is Timeframe.MONTH:
        return subtract_month(local_now)
    return None


def filter_by_timeframe(
    records: Iterable[VisitRecord],
    timeframe: Timeframe,
    now: datetime,
    tz: tzinfo | None = None,
) -> list[VisitRecord]:
    """Keep the records that fall inside a reporting window.

    - ``DAY``: same local calendar date as ``now`` (not a rolling 24 hours).
    - ``WEEK``: ``timestamp >= now - 7 days`` (rolling).
    - ``MONTH``: ``timestamp >= now - 1 calendar month``.
    - ``ALL``: everything.

    Args:
        records: Records to filter. Order is preserved.
        timeframe: The reporting window.
        now: Reference instant.
        tz: Calendar timezone, host local when None.

    Returns:
        The matching records in input order.
    """
    timeframe = Timeframe(timeframe)
    if timeframe is Timeframe.ALL:
        return list(records)

    if timeframe is Timeframe.DAY:
        today = to_local(now, tz).date()
        return [r for r in records if to_local(r.timestamp, tz).date() == today]

    # Same-zone datetimes compare by wall clock and ignore fold; compare instants
    cutoff = timeframe_cutoff(timeframe, now, tz).astimezone(UTC)
    return [r for r in records if r.timestamp.astimezone(UTC) >= cutoff]
