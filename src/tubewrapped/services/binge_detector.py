"""
Binge session detection.

Splits a chronologically sorted list of watch events into runs where each
event follows the previous one within a maximum gap. Runs with fewer than
the minimum number of videos are dropped; the rest become BingeSessions.
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import timedelta
from typing import List, Sequence

from ..models.analytics import BingeSession, BingeVideo
from ..models.watch_event import WatchEvent
from ..utils.numbers import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_MAX_GAP_MINUTES = 120
DEFAULT_MIN_VIDEOS = 5


def build_binge_session(events: Sequence[WatchEvent]) -> BingeSession:
    """
    Summarize one run of events as a BingeSession.

    The dominant channel is the most frequent channel name in the run; on a
    tie the channel seen first wins.
    """
    channel_counts = Counter(event.channel_name for event in events)
    # most_common() orders equal counts by first insertion
    dominant_channel = channel_counts.most_common(1)[0][0]

    start, end = events[0].timestamp, events[-1].timestamp
    return BingeSession(
        start_time=start,
        end_time=end,
        video_count=len(events),
        duration_minutes=round_half_up((end - start).total_seconds() / 60),
        dominant_channel=dominant_channel,
        videos=[
            BingeVideo(title=event.title, channel=event.channel_name)
            for event in events
        ],
    )


def detect_binge_sessions(
    events: Sequence[WatchEvent],
    max_gap_minutes: int = DEFAULT_MAX_GAP_MINUTES,
    min_videos: int = DEFAULT_MIN_VIDEOS,
) -> List[BingeSession]:
    """
    Find binge sessions in chronologically sorted events.

    Parameters
    ----------
    events : Sequence[WatchEvent]
        Events in ascending timestamp order.
    max_gap_minutes : int
        Largest gap between consecutive events that keeps a run going.
    min_videos : int
        Smallest run that counts as a session.

    Returns
    -------
    List[BingeSession]
        Sessions sorted by video count, largest first. Sessions of equal
        size keep chronological order.
    """
    max_gap = timedelta(minutes=max_gap_minutes)
    sessions: List[BingeSession] = []
    current: List[WatchEvent] = []

    for event in events:
        if current and event.timestamp - current[-1].timestamp > max_gap:
            if len(current) >= min_videos:
                sessions.append(build_binge_session(current))
            current = []
        current.append(event)

    # Flush the trailing run
    if len(current) >= min_videos:
        sessions.append(build_binge_session(current))

    sessions.sort(key=lambda session: session.video_count, reverse=True)
    logger.debug(f"Detected {len(sessions)} binge sessions in {len(events)} events")
    return sessions
