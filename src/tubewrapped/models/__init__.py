"""
Data models for tubewrapped.

Pydantic models for parsed watch events and for the analytics report
produced from them.
"""

from __future__ import annotations

from .analytics import (
    AnalyticsReport,
    BingeSession,
    BingeVideo,
    CategoryCounts,
    ChannelStat,
    DateRange,
    ExtractionSummary,
    FunFacts,
    RewatchInfo,
    RewatchSummary,
    TemporalPatterns,
    VolumeMetrics,
)
from .enums import ContentCategory, WatchAction
from .watch_event import UNKNOWN_CHANNEL, WatchEvent

__all__ = [
    # Enums
    "ContentCategory",
    "WatchAction",
    # Events
    "UNKNOWN_CHANNEL",
    "WatchEvent",
    # Analytics
    "AnalyticsReport",
    "BingeSession",
    "BingeVideo",
    "CategoryCounts",
    "ChannelStat",
    "DateRange",
    "ExtractionSummary",
    "FunFacts",
    "RewatchInfo",
    "RewatchSummary",
    "TemporalPatterns",
    "VolumeMetrics",
]
