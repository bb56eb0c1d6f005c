"""
Keyword-based content categorizer.

Assigns each watch event exactly one ContentCategory by testing the title and
channel name against an ordered list of case-insensitive patterns. The first
matching rule wins, so the order of CATEGORY_RULES decides overlapping
keywords (e.g. "game" is claimed by gaming before sports is consulted).
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, List, Pattern, Tuple

from ..models.analytics import CategoryCounts
from ..models.enums import ContentCategory
from ..models.watch_event import WatchEvent

CATEGORY_RULES: List[Tuple[ContentCategory, Pattern[str]]] = [
    (
        ContentCategory.MUSIC,
        re.compile(r"official\s+video|lyrics|audio|song|music|mv|album", re.IGNORECASE),
    ),
    (
        ContentCategory.GAMING,
        re.compile(
            r"gameplay|let'?s\s+play|gaming|walkthrough|playthrough|game|stream",
            re.IGNORECASE,
        ),
    ),
    (
        ContentCategory.EDUCATION,
        re.compile(
            r"tutorial|how\s+to|course|explained|lesson|guide|learn|teach",
            re.IGNORECASE,
        ),
    ),
    (
        ContentCategory.ENTERTAINMENT,
        re.compile(r"vlog|comedy|challenge|prank|reaction|funny|meme", re.IGNORECASE),
    ),
    (
        ContentCategory.TECH,
        re.compile(
            r"review|unboxing|tech|smartphone|laptop|gadget|iphone|android|samsung",
            re.IGNORECASE,
        ),
    ),
    (
        ContentCategory.PODCASTS,
        re.compile(r"podcast|interview|talk\s+show|conversation", re.IGNORECASE),
    ),
    (
        ContentCategory.NEWS,
        re.compile(r"news|breaking|headlines|report", re.IGNORECASE),
    ),
    (
        ContentCategory.SPORTS,
        re.compile(
            r"match|game|highlights|cricket|football|basketball|soccer|tennis|sports",
            re.IGNORECASE,
        ),
    ),
]
"""Ordered (category, pattern) rules; evaluation order is significant."""


def categorize(title: str, channel_name: str) -> ContentCategory:
    """Return the first category whose pattern matches title and channel."""
    text = f"{title} {channel_name}"
    for category, pattern in CATEGORY_RULES:
        if pattern.search(text):
            return category
    return ContentCategory.OTHER


def categorize_event(event: WatchEvent) -> ContentCategory:
    return categorize(event.title, event.channel_name)


def count_categories(events: Iterable[WatchEvent]) -> CategoryCounts:
    """Count events per category; every event lands in exactly one bucket."""
    counts: Counter[ContentCategory] = Counter(
        categorize_event(event) for event in events
    )
    return CategoryCounts(
        **{category.value: counts[category] for category in ContentCategory}
    )
