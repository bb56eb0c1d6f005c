"""
Property-based tests for extraction and analytics invariants.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import List

from hypothesis import given, settings
from hypothesis import strategies as st

from tests.factories.takeout_html_factory import takeout_document, watch_entry_html
from tests.factories.watch_event_factory import WatchEventFactory
from tubewrapped.config.settings import Settings
from tubewrapped.models import WatchEvent
from tubewrapped.parsers import extract
from tubewrapped.services import calculate_analytics, count_categories
from tubewrapped.services.analytics_service import longest_streak
from tubewrapped.services.binge_detector import detect_binge_sessions

BASE = datetime(2025, 1, 1, tzinfo=timezone.utc)
CONFIG = Settings(log_level="WARNING")

minute_offsets = st.lists(
    st.integers(min_value=0, max_value=60 * 24 * 60), min_size=1, max_size=40
)
channel_names = st.sampled_from(["A", "B", "C", "D"])


def timeline(offsets: List[int], channels: List[str]) -> List[WatchEvent]:
    return [
        WatchEventFactory(
            timestamp=BASE + timedelta(minutes=offset),
            channel_name=channels[i % len(channels)],
        )
        for i, offset in enumerate(sorted(offsets))
    ]


class TestHypothesisProperties:
    """Property-based tests using Hypothesis for analytics invariants."""

    @given(st.lists(st.text(min_size=1, max_size=60), min_size=1, max_size=30))
    @settings(max_examples=100)
    def test_every_event_has_one_category(self, titles: List[str]) -> None:
        events = [WatchEventFactory(title=title) for title in titles]
        assert count_categories(events).total == len(events)

    @given(minute_offsets, st.lists(channel_names, min_size=1, max_size=4))
    @settings(max_examples=100)
    def test_binge_sessions_invariants(
        self, offsets: List[int], channels: List[str]
    ) -> None:
        events = timeline(offsets, channels)

        sessions = detect_binge_sessions(events)

        assert all(s.video_count >= 5 for s in sessions)
        assert sum(s.video_count for s in sessions) <= len(events)
        counts = [s.video_count for s in sessions]
        assert counts == sorted(counts, reverse=True)
        for session in sessions:
            assert session.start_time <= session.end_time
            assert len(session.videos) == session.video_count

        chronological = sorted(sessions, key=lambda s: s.start_time)
        for earlier, later in zip(chronological, chronological[1:]):
            assert earlier.end_time < later.start_time

    @given(minute_offsets, st.lists(channel_names, min_size=1, max_size=4))
    @settings(max_examples=50)
    def test_report_totals_agree(self, offsets: List[int], channels: List[str]) -> None:
        events = timeline(offsets, channels)

        report = calculate_analytics(events, CONFIG)

        total = len(events)
        assert report.volume.total_videos == total
        assert sum(c.video_count for c in report.channels) == total
        assert sum(report.patterns.by_hour) == total
        assert sum(report.patterns.by_day_of_week) == total
        assert sum(report.patterns.by_month) == total
        assert sum(report.patterns.by_date.values()) == total
        assert report.categories.total == total
        assert (
            report.patterns.weekday_count + report.patterns.weekend_count == total
        )
        assert report.fun_facts.longest_streak >= 1

        share = sum(c.percentage for c in report.channels)
        assert abs(share - 100) <= Decimal("0.05") * len(report.channels)
        # Factory video IDs are unique
        assert report.rewatches.rewatch_rate == 0

    @given(
        st.lists(
            st.datetimes(
                min_value=datetime(2015, 1, 1), max_value=datetime(2026, 12, 31)
            ),
            min_size=1,
            max_size=20,
        )
    )
    @settings(max_examples=50)
    def test_extracted_events_are_sorted(self, timestamps: List[datetime]) -> None:
        html = takeout_document(
            *[
                watch_entry_html(
                    video_id=f"v{i:010d}",
                    timestamp=ts.strftime("%d %b %Y, %H:%M:%S GMT"),
                )
                for i, ts in enumerate(timestamps)
            ]
        )

        events = extract(html)

        assert len(events) == len(timestamps)
        extracted = [e.timestamp for e in events]
        assert extracted == sorted(extracted)

    @given(
        st.lists(
            st.dates(min_value=date(2024, 1, 1), max_value=date(2025, 12, 31)),
            min_size=1,
            max_size=50,
        )
    )
    @settings(max_examples=100)
    def test_streak_bounds(self, days: List[date]) -> None:
        keys = [day.isoformat() for day in days]
        assert 1 <= longest_streak(keys) <= len(set(keys))
