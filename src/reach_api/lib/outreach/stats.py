"""Visit aggregation: summary counts and the per-residence breakdown."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from reach_api.lib.outreach.types import (
    AnswerStatus,
    DashboardStats,
    MarkerStyle,
    ResidenceType,
    ResidenceTypeCount,
    ResponseType,
    VisitRecord,
)

POSITIVE_COLOR = "#2ecc71"
NEGATIVE_COLOR = "#e74c3c"
NO_ANSWER_COLOR = "#f39c12"

# simplestyle marker-symbol per residence type; unlisted types use DEFAULT_SYMBOL
RESIDENCE_SYMBOLS: dict[ResidenceType, str] = {
    ResidenceType.HOUSE: "home",
    ResidenceType.APARTMENT: "building",
    ResidenceType.HOTEL: "lodging",
}
DEFAULT_SYMBOL = "marker"


def compute_stats(records: Iterable[VisitRecord]) -> DashboardStats:
    """Count visits by answer status and, for answered visits, by response.

    Unanswered visits never contribute to ``positive`` or ``negative``
    even though their ``response_type`` is populated.

    Args:
        records: Records to aggregate, typically pre-filtered by timeframe.

    Returns:
        DashboardStats with ``answered + no_answer == total_visits`` and
        ``positive + negative == answered``.
    """
    total = answered = positive = negative = 0
    for record in records:
        total += 1
        if record.answer_status is not AnswerStatus.ANSWERED:
            continue
        answered += 1
        if record.response_type is ResponseType.POSITIVE:
            positive += 1
        else:
            negative += 1

    return DashboardStats(
        total_visits=total,
        answered=answered,
        no_answer=total - answered,
        positive=positive,
        negative=negative,
    )


def breakdown_by_residence_type(records: Iterable[VisitRecord]) -> list[ResidenceTypeCount]:
    """Count visits per residence type, including zero-count categories.

    Returns:
        One entry per ResidenceType member in enumeration order.
    """
    counts = Counter(record.residence_type for record in records)
    return [ResidenceTypeCount(residence_type, counts[residence_type]) for residence_type in ResidenceType]


def marker_style(record: VisitRecord) -> MarkerStyle:
    """Map marker for a visit: symbol by residence type, color by outcome."""
    if record.answer_status is AnswerStatus.ANSWERED:
        color = POSITIVE_COLOR if record.response_type is ResponseType.POSITIVE else NEGATIVE_COLOR
    else:
        color = NO_ANSWER_COLOR
    return MarkerStyle(symbol=RESIDENCE_SYMBOLS.get(record.residence_type, DEFAULT_SYMBOL), color=color)
