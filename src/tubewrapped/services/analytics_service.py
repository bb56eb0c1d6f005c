"""
Watch analytics service.

Computes the full AnalyticsReport for a sequence of watch events: volume,
channel rankings, hour/weekday/month/date histograms, content categories,
binge sessions, rewatches and fun facts. Every accumulator is local to a
single call and the returned report is frozen.
"""

from __future__ import annotations

import logging
import math
import re
from collections import Counter
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from ..config.settings import Settings
from ..config.settings import settings as default_settings
from ..models.analytics import (
    AnalyticsReport,
    BingeSession,
    ChannelStat,
    DateRange,
    FunFacts,
    RewatchInfo,
    RewatchSummary,
    TemporalPatterns,
    VolumeMetrics,
)
from ..models.watch_event import WatchEvent
from ..utils.numbers import one_decimal, percentage, round_half_up
from .binge_detector import detect_binge_sessions
from .categorizer import count_categories

logger = logging.getLogger(__name__)

DEFAULT_WORD = "video"
MIN_WORD_LENGTH = 4

# fmt: off
STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "is", "was", "are", "were", "been", "be", "have", "has",
        "had", "do", "does", "did", "will", "would", "could", "should", "may",
        "might", "must", "can", "this", "that", "these", "those", "i", "you",
        "he", "she", "it", "we", "they", "my", "your", "his", "her", "its",
        "our", "their",
    }
)
# fmt: on

_WORD_RE = re.compile(r"\b\w+\b")


def _argmax(values: Sequence[int]) -> int:
    """Index of the largest value; the first one on ties."""
    return values.index(max(values))


def _volume_metrics(
    events: Sequence[WatchEvent], minutes_per_video: int
) -> VolumeMetrics:
    total_videos = len(events)
    start, end = events[0].timestamp, events[-1].timestamp
    days = max(1, math.ceil((end - start).total_seconds() / 86400))

    return VolumeMetrics(
        total_videos=total_videos,
        unique_channels=len({event.channel_name for event in events}),
        total_hours_estimated=round_half_up(total_videos * minutes_per_video / 60),
        average_videos_per_day=one_decimal(total_videos / days),
        date_range=DateRange(start=start, end=end),
    )


def _channel_stats(events: Sequence[WatchEvent]) -> List[ChannelStat]:
    """Per-channel counts, most watched first; ties keep first-seen order."""
    grouped: Dict[str, List[WatchEvent]] = {}
    for event in events:
        grouped.setdefault(event.channel_name, []).append(event)

    total = len(events)
    stats = [
        ChannelStat(
            channel_name=name,
            channel_id=channel_events[0].channel_id,
            video_count=len(channel_events),
            first_watched=channel_events[0].timestamp,
            last_watched=channel_events[-1].timestamp,
            percentage=percentage(len(channel_events), total),
        )
        for name, channel_events in grouped.items()
    ]
    stats.sort(key=lambda stat: stat.video_count, reverse=True)
    return stats


def _temporal_patterns(events: Sequence[WatchEvent]) -> TemporalPatterns:
    by_hour = [0] * 24
    by_day_of_week = [0] * 7
    by_month = [0] * 12
    by_date: Dict[str, int] = {}

    for event in events:
        by_hour[event.hour] += 1
        by_day_of_week[event.day_of_week] += 1
        by_month[event.month] += 1
        by_date[event.date_key] = by_date.get(event.date_key, 0) + 1

    return TemporalPatterns(
        by_hour=by_hour,
        by_day_of_week=by_day_of_week,
        by_month=by_month,
        by_date=by_date,
        peak_hour=_argmax(by_hour),
        peak_day=_argmax(by_day_of_week),
        peak_month=_argmax(by_month),
        weekday_count=sum(by_day_of_week[1:6]),
        weekend_count=by_day_of_week[0] + by_day_of_week[6],
    )


def _rewatch_summary(
    events: Sequence[WatchEvent], comfort_channel_limit: int
) -> RewatchSummary:
    views: Dict[str, List[WatchEvent]] = {}
    for event in events:
        views.setdefault(event.video_id, []).append(event)

    rewatched = [
        RewatchInfo(
            video_id=video_id,
            title=video_events[0].title,
            channel=video_events[0].channel_name,
            count=len(video_events),
        )
        for video_id, video_events in views.items()
        if len(video_events) > 1
    ]
    rewatched.sort(key=lambda info: info.count, reverse=True)

    total_rewatches = sum(info.count - 1 for info in rewatched)

    channel_rewatches: Dict[str, int] = {}
    for info in rewatched:
        channel_rewatches[info.channel] = (
            channel_rewatches.get(info.channel, 0) + info.count - 1
        )
    comfort_channels = sorted(
        channel_rewatches, key=lambda name: channel_rewatches[name], reverse=True
    )[:comfort_channel_limit]

    return RewatchSummary(
        most_rewatched_video=rewatched[0] if rewatched else None,
        rewatched_videos=rewatched,
        total_rewatches=total_rewatches,
        rewatch_rate=percentage(total_rewatches, len(events)),
        comfort_channels=comfort_channels,
    )


def most_common_word(titles: Sequence[str]) -> str:
    """
    Most frequent meaningful word across titles.

    Words are lower-cased alphanumeric tokens longer than three characters
    that are not stop words. Ties go to the word seen first.
    """
    word_counts: Counter[str] = Counter()
    for title in titles:
        for word in _WORD_RE.findall(title.lower()):
            if len(word) >= MIN_WORD_LENGTH and word not in STOP_WORDS:
                word_counts[word] += 1

    if not word_counts:
        return DEFAULT_WORD
    return word_counts.most_common(1)[0][0]


def longest_streak(date_keys: Sequence[str]) -> int:
    """Longest run of consecutive calendar days among ISO date keys (min 1)."""
    days = sorted(date.fromisoformat(key) for key in set(date_keys))
    longest = current = 1
    for previous, day in zip(days, days[1:]):
        if day - previous == timedelta(days=1):
            current += 1
            longest = max(longest, current)
        else:
            current = 1
    return longest


def _fun_facts(
    events: Sequence[WatchEvent],
    patterns: TemporalPatterns,
    binges: Sequence[BingeSession],
    config: Settings,
) -> FunFacts:
    milestone = config.milestone_video_number

    return FunFacts(
        late_night_count=sum(1 for e in events if e.hour >= 23 or e.hour < 5),
        early_bird_count=sum(1 for e in events if 5 <= e.hour < 8),
        first_video=events[0],
        last_video=events[-1],
        video_1000=events[milestone - 1] if len(events) >= milestone else None,
        longest_title=max((e.title for e in events), key=len),
        most_common_word=most_common_word([e.title for e in events]),
        procrastination_score=sum(
            1 for e in events if e.is_weekday and 9 <= e.hour <= 17
        ),
        longest_streak=longest_streak(list(patterns.by_date)),
        rabbit_hole_count=sum(
            1 for b in binges if b.video_count >= config.rabbit_hole_min_videos
        ),
    )


def calculate_analytics(
    events: Sequence[WatchEvent], config: Optional[Settings] = None
) -> Optional[AnalyticsReport]:
    """
    Compute the analytics report for a sequence of watch events.

    Parameters
    ----------
    events : Sequence[WatchEvent]
        Events in ascending timestamp order, typically one year's worth.
    config : Settings, optional
        Thresholds to use; defaults to the application settings.

    Returns
    -------
    Optional[AnalyticsReport]
        The report, or None when there are no events.
    """
    if not events:
        logger.info("No watch events to analyze")
        return None

    config = config or default_settings

    patterns = _temporal_patterns(events)
    binges = detect_binge_sessions(
        events,
        max_gap_minutes=config.binge_gap_minutes,
        min_videos=config.binge_min_videos,
    )

    report = AnalyticsReport(
        volume=_volume_metrics(events, config.minutes_per_video),
        channels=_channel_stats(events),
        patterns=patterns,
        categories=count_categories(events),
        binges=binges,
        rewatches=_rewatch_summary(events, config.comfort_channel_limit),
        fun_facts=_fun_facts(events, patterns, binges, config),
    )

    logger.info(
        f"Calculated analytics for {report.volume.total_videos} videos "
        f"across {report.volume.unique_channels} channels"
    )
    return report


analyze = calculate_analytics
