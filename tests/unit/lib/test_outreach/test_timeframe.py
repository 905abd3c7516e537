"""Tests for the timeframe filter."""

from datetime import UTC, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from reach_api.lib.outreach import (
    AnswerStatus,
    ResidenceType,
    Timeframe,
    VisitRecord,
    filter_by_timeframe,
    subtract_month,
    timeframe_cutoff,
)

EST = timezone(timedelta(hours=-5))
NOW = datetime(2025, 3, 31, 15, 0, tzinfo=EST)


def _make_record(timestamp: datetime, residence_type: ResidenceType = ResidenceType.HOUSE) -> VisitRecord:
    """Create a visit at the given instant."""
    return VisitRecord.create(0.0, 0.0, residence_type, AnswerStatus.ANSWERED, timestamp=timestamp)


class TestSubtractMonth:
    """Tests for calendar month subtraction."""

    def test_simple(self) -> None:
        assert subtract_month(datetime(2025, 6, 15, 9, 30)) == datetime(2025, 5, 15, 9, 30)

    def test_clamps_to_short_month(self) -> None:
        assert subtract_month(datetime(2025, 3, 31)) == datetime(2025, 2, 28)

    def test_clamps_to_leap_day(self) -> None:
        assert subtract_month(datetime(2024, 3, 31)) == datetime(2024, 2, 29)

    def test_january_wraps_to_december(self) -> None:
        assert subtract_month(datetime(2025, 1, 10)) == datetime(2024, 12, 10)

    def test_preserves_tzinfo(self) -> None:
        assert subtract_month(NOW).tzinfo is EST


class TestTimeframeCutoff:
    """Tests for timeframe_cutoff."""

    def test_day_starts_at_local_midnight(self) -> None:
        assert timeframe_cutoff(Timeframe.DAY, NOW, EST) == datetime(2025, 3, 31, tzinfo=EST)

    def test_week_is_rolling(self) -> None:
        assert timeframe_cutoff(Timeframe.WEEK, NOW, EST) == datetime(2025, 3, 24, 15, 0, tzinfo=EST)

    def test_month_uses_calendar_month(self) -> None:
        assert timeframe_cutoff(Timeframe.MONTH, NOW, EST) == datetime(2025, 2, 28, 15, 0, tzinfo=EST)

    def test_all_has_no_cutoff(self) -> None:
        assert timeframe_cutoff(Timeframe.ALL, NOW, EST) is None


class TestFilterByTimeframe:
    """Tests for filter_by_timeframe."""

    def test_day_uses_calendar_day(self) -> None:
        early_today = _make_record(datetime(2025, 3, 31, 0, 30, tzinfo=EST))
        late_yesterday = _make_record(datetime(2025, 3, 30, 23, 59, tzinfo=EST))
        result = filter_by_timeframe([early_today, late_yesterday], Timeframe.DAY, NOW, EST)
        assert result == [early_today]

    def test_day_uses_local_not_utc_date(self) -> None:
        # 03:00 UTC on Mar 31 is still Mar 30 in EST
        utc_record = _make_record(datetime(2025, 3, 31, 3, 0, tzinfo=UTC))
        assert filter_by_timeframe([utc_record], Timeframe.DAY, NOW, EST) == []
        assert filter_by_timeframe([utc_record], Timeframe.DAY, NOW, UTC) == [utc_record]

    def test_day_includes_later_today(self) -> None:
        later = _make_record(datetime(2025, 3, 31, 22, 0, tzinfo=EST))
        assert filter_by_timeframe([later], Timeframe.DAY, NOW, EST) == [later]

    def test_week_boundary_inclusive(self) -> None:
        on_cutoff = _make_record(datetime(2025, 3, 24, 15, 0, tzinfo=EST))
        before_cutoff = _make_record(datetime(2025, 3, 24, 14, 59, tzinfo=EST))
        result = filter_by_timeframe([on_cutoff, before_cutoff], Timeframe.WEEK, NOW, EST)
        assert result == [on_cutoff]

    def test_month_boundary_clamped(self) -> None:
        on_cutoff = _make_record(datetime(2025, 2, 28, 15, 0, tzinfo=EST))
        before_cutoff = _make_record(datetime(2025, 2, 28, 14, 59, tzinfo=EST))
        result = filter_by_timeframe([on_cutoff, before_cutoff], Timeframe.MONTH, NOW, EST)
        assert result == [on_cutoff]

    def test_month_differs_from_thirty_days(self) -> None:
        # Mar 31 minus one month is Feb 28, which is 31 days back
        thirty_one_days_ago = _make_record(NOW - timedelta(days=31))
        assert filter_by_timeframe([thirty_one_days_ago], Timeframe.MONTH, NOW, EST) == [thirty_one_days_ago]

    def test_all_returns_everything_in_order(self) -> None:
        records = [
            _make_record(datetime(2020, 1, 1, tzinfo=UTC)),
            _make_record(datetime(2030, 1, 1, tzinfo=UTC)),
            _make_record(datetime(2025, 3, 31, tzinfo=UTC)),
        ]
        assert filter_by_timeframe(records, Timeframe.ALL, NOW, EST) == records

    def test_preserves_input_order(self) -> None:
        records = [
            _make_record(datetime(2025, 3, 30, 10, 0, tzinfo=EST)),
            _make_record(datetime(2025, 3, 31, 10, 0, tzinfo=EST)),
            _make_record(datetime(2025, 3, 29, 10, 0, tzinfo=EST)),
        ]
        assert filter_by_timeframe(records, Timeframe.WEEK, NOW, EST) == records

    @pytest.mark.parametrize("timeframe", list(Timeframe))
    def test_empty_input(self, timeframe: Timeframe) -> None:
        assert filter_by_timeframe([], timeframe, NOW, EST) == []

    def test_accepts_string_timeframe(self) -> None:
        record = _make_record(NOW)
        assert filter_by_timeframe([record], "day", NOW, EST) == [record]  # type: ignore[arg-type]

    def test_nested_windows(self) -> None:
        offsets = [timedelta(hours=h) for h in (0, 5, 14, 20, 30, 24 * 6, 24 * 8, 24 * 29, 24 * 40, 24 * 400)]
        records = [_make_record(NOW - offset) for offset in offsets]

        day = filter_by_timeframe(records, Timeframe.DAY, NOW, EST)
        week = filter_by_timeframe(records, Timeframe.WEEK, NOW, EST)
        month = filter_by_timeframe(records, Timeframe.MONTH, NOW, EST)
        everything = filter_by_timeframe(records, Timeframe.ALL, NOW, EST)

        assert {r.id for r in day} <= {r.id for r in week}
        assert {r.id for r in week} <= {r.id for r in month}
        assert {r.id for r in month} <= {r.id for r in everything}
        assert len(day) == 3
        assert len(week) == 6
        assert len(month) == 8
        assert len(everything) == 10

    def test_naive_datetimes_use_local_calendar(self) -> None:
        now = datetime(2025, 6, 15, 12, 0)
        today = _make_record(datetime(2025, 6, 15, 0, 5))
        yesterday = _make_record(datetime(2025, 6, 14, 23, 55))
        assert filter_by_timeframe([today, yesterday], Timeframe.DAY, now) == [today]

    def test_week_cutoff_in_repeated_dst_hour(self) -> None:
        """Records in the second pass of a fall-back hour are compared by instant."""
        new_york = ZoneInfo("America/New_York")
        # 2025-11-09 01:30 EST; the cutoff is 2025-11-02 01:30 EDT (05:30 UTC)
        now = datetime(2025, 11, 9, 6, 30, tzinfo=UTC)
        before_cutoff = _make_record(datetime(2025, 11, 2, 5, 15, tzinfo=UTC))  # 01:15 EDT
        repeated_hour = _make_record(datetime(2025, 11, 2, 6, 15, tzinfo=UTC))  # 01:15 EST

        week = filter_by_timeframe([before_cutoff, repeated_hour], Timeframe.WEEK, now, new_york)
        assert week == [repeated_hour]
