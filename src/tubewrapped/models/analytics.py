"""
Watch analytics models.

Defines Pydantic models for the analytics report computed from a
year of watch events: volume, channel rankings, temporal patterns,
categories, binge sessions, rewatches and fun facts.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import ContentCategory
from .watch_event import WatchEvent


class DateRange(BaseModel):
    """First and last watch timestamps."""

    model_config = ConfigDict(frozen=True)

    start: datetime = Field(..., description="Earliest watch timestamp")
    end: datetime = Field(..., description="Latest watch timestamp")


class VolumeMetrics(BaseModel):
    """Model for overall viewing volume."""

    model_config = ConfigDict(frozen=True)

    total_videos: int = Field(0, description="Number of watched videos")
    unique_channels: int = Field(0, description="Distinct channel names")
    total_hours_estimated: int = Field(
        0, description="Estimated hours watched (fixed minutes per video)"
    )
    average_videos_per_day: Decimal = Field(
        Decimal("0.0"), description="Videos per day across the date range"
    )
    date_range: DateRange = Field(..., description="First and last watch")


class ChannelStat(BaseModel):
    """Model for per-channel viewing statistics."""

    model_config = ConfigDict(frozen=True)

    channel_name: str = Field(..., description="Channel display name")
    channel_id: str = Field("", description="Channel ID of the first occurrence")
    video_count: int = Field(0, description="Videos watched from this channel")
    first_watched: datetime = Field(..., description="First watch from channel")
    last_watched: datetime = Field(..., description="Last watch from channel")
    percentage: Decimal = Field(
        Decimal("0.0"), description="Percentage of total videos"
    )


class TemporalPatterns(BaseModel):
    """Model for hour, weekday, month and date histograms."""

    model_config = ConfigDict(frozen=True)

    by_hour: List[int] = Field(..., description="24 buckets, hour 0-23 (UTC)")
    by_day_of_week: List[int] = Field(..., description="7 buckets, 0 = Sunday")
    by_month: List[int] = Field(..., description="12 buckets, 0 = January")
    by_date: Dict[str, int] = Field(
        default_factory=dict, description="ISO date to watch count"
    )
    peak_hour: int = Field(0, description="Busiest hour")
    peak_day: int = Field(0, description="Busiest weekday (0 = Sunday)")
    peak_month: int = Field(0, description="Busiest month (0 = January)")
    weekday_count: int = Field(0, description="Videos watched Monday-Friday")
    weekend_count: int = Field(0, description="Videos watched Saturday-Sunday")


class CategoryCounts(BaseModel):
    """Video counts per content category."""

    model_config = ConfigDict(frozen=True)

    music: int = 0
    gaming: int = 0
    education: int = 0
    entertainment: int = 0
    tech: int = 0
    podcasts: int = 0
    news: int = 0
    sports: int = 0
    other: int = 0

    @property
    def total(self) -> int:
        return sum(self.as_dict().values())

    def as_dict(self) -> Dict[ContentCategory, int]:
        """Counts keyed by category, in rule order."""
        return {category: getattr(self, category.value) for category in ContentCategory}


class BingeVideo(BaseModel):
    """A video inside a binge session."""

    model_config = ConfigDict(frozen=True)

    title: str
    channel: str


class BingeSession(BaseModel):
    """Model for a run of closely spaced watches."""

    model_config = ConfigDict(frozen=True)

    start_time: datetime = Field(..., description="First watch in the session")
    end_time: datetime = Field(..., description="Last watch in the session")
    video_count: int = Field(..., description="Videos in the session")
    duration_minutes: int = Field(
        0, description="Minutes between first and last watch, rounded"
    )
    dominant_channel: str = Field(..., description="Most watched channel")
    videos: List[BingeVideo] = Field(
        default_factory=list, description="Videos in watch order"
    )


class RewatchInfo(BaseModel):
    """A video watched more than once."""

    model_config = ConfigDict(frozen=True)

    video_id: str = Field(..., description="YouTube video ID")
    title: str = Field(..., description="Title of the first occurrence")
    channel: str = Field(..., description="Channel of the first occurrence")
    count: int = Field(..., description="Number of times watched")


class RewatchSummary(BaseModel):
    """Model for rewatch analysis."""

    model_config = ConfigDict(frozen=True)

    most_rewatched_video: Optional[RewatchInfo] = Field(
        None, description="Video with the most watches"
    )
    rewatched_videos: List[RewatchInfo] = Field(
        default_factory=list, description="All rewatched videos, most first"
    )
    total_rewatches: int = Field(0, description="Watches beyond the first")
    rewatch_rate: Decimal = Field(
        Decimal("0.0"), description="Rewatches as a percentage of all videos"
    )
    comfort_channels: List[str] = Field(
        default_factory=list, description="Channels with the most rewatches"
    )


class FunFacts(BaseModel):
    """Model for assorted trivia about the year."""

    model_config = ConfigDict(frozen=True)

    late_night_count: int = Field(0, description="Watches from 23:00 to 04:59")
    early_bird_count: int = Field(0, description="Watches from 05:00 to 07:59")
    first_video: WatchEvent = Field(..., description="First video of the period")
    last_video: WatchEvent = Field(..., description="Last video of the period")
    video_1000: Optional[WatchEvent] = Field(
        None, description="The milestone video, if reached"
    )
    longest_title: str = Field("", description="Longest video title")
    most_common_word: str = Field("video", description="Most frequent title word")
    procrastination_score: int = Field(
        0, description="Weekday watches between 09:00 and 17:59"
    )
    longest_streak: int = Field(1, description="Most consecutive days watched")
    rabbit_hole_count: int = Field(0, description="Binge sessions of 10+ videos")


class AnalyticsReport(BaseModel):
    """Complete analytics for one filtered set of watch events."""

    model_config = ConfigDict(frozen=True)

    volume: VolumeMetrics
    channels: List[ChannelStat] = Field(default_factory=list)
    patterns: TemporalPatterns
    categories: CategoryCounts
    binges: List[BingeSession] = Field(default_factory=list)
    rewatches: RewatchSummary
    fun_facts: FunFacts


class ExtractionSummary(BaseModel):
    """Counts of how export entries were handled during extraction."""

    model_config = ConfigDict(frozen=True)

    format_name: str = Field(..., description="Export format that was parsed")
    entries: int = Field(0, description="Candidate entries inspected")
    viewed: int = Field(0, description="Entries with a Viewed action")
    skipped_no_action: int = Field(0, description="Entries with no action verb")
    skipped_no_video: int = Field(0, description="Entries without a video link")
    skipped_no_timestamp: int = Field(
        0, description="Entries without a parseable timestamp"
    )
    errors: int = Field(0, description="Entries that raised while parsing")
    events: int = Field(0, description="Watch events produced")
