"""Outreach library: public API for visit records and dashboard aggregation.

Pure functions over in-memory record snapshots: timeframe filtering,
summary statistics, residence breakdown, daily series, and map layers.
Nothing here performs I/O or consults the login session.
"""

from reach_api.lib.outreach.dashboard import build_dashboard, to_feature, to_feature_collection
from reach_api.lib.outreach.series import daily_visit_series
from reach_api.lib.outreach.stats import breakdown_by_residence_type, compute_stats, marker_style
from reach_api.lib.outreach.timeframe import filter_by_timeframe, subtract_month, timeframe_cutoff
from reach_api.lib.outreach.types import (
    AnswerStatus,
    DailyCount,
    DashboardSnapshot,
    DashboardStats,
    MarkerStyle,
    ResidenceType,
    ResidenceTypeCount,
    ResponseType,
    Timeframe,
    VisitRecord,
    lookup_member,
)

__all__ = [
    "AnswerStatus",
    "DailyCount",
    "DashboardSnapshot",
    "DashboardStats",
    "MarkerStyle",
    "ResidenceType",
    "ResidenceTypeCount",
    "ResponseType",
    "Timeframe",
    "VisitRecord",
    "breakdown_by_residence_type",
    "build_dashboard",
    "compute_stats",
    "daily_visit_series",
    "filter_by_timeframe",
    "lookup_member",
    "marker_style",
    "subtract_month",
    "timeframe_cutoff",
    "to_feature",
    "to_feature_collection",
]
