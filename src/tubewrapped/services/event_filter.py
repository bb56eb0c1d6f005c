"""
Year filtering for watch events.
"""

from __future__ import annotations

from typing import Iterable, List

from ..models.watch_event import WatchEvent


def filter_by_year(events: Iterable[WatchEvent], year: int) -> List[WatchEvent]:
    """Keep the events watched in ``year`` (UTC), preserving order."""
    return [event for event in events if event.year == year]


def available_years(events: Iterable[WatchEvent]) -> List[int]:
    """Distinct years present in the events, oldest first."""
    return sorted({event.year for event in events})
