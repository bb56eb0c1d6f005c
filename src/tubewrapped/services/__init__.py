"""
Services module for tubewrapped.

Contains the analytics pipeline: year filtering, content categorization,
binge detection, report aggregation and the cached per-export service.
"""

from __future__ import annotations

from tubewrapped.services.analytics_service import analyze, calculate_analytics
from tubewrapped.services.binge_detector import detect_binge_sessions
from tubewrapped.services.categorizer import categorize, count_categories
from tubewrapped.services.event_filter import available_years, filter_by_year
from tubewrapped.services.wrapped_service import WrappedService

__all__: list[str] = [
    "WrappedService",
    "analyze",
    "available_years",
    "calculate_analytics",
    "categorize",
    "count_categories",
    "detect_binge_sessions",
    "filter_by_year",
]
