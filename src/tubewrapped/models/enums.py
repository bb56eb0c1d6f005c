"""
Enums for tubewrapped models.

Defines enumeration types used across the application for consistent
type safety and validation.
"""

from __future__ import annotations

from enum import Enum


class WatchAction(str, Enum):
    """Activity verbs recorded in the watch-history export."""

    WATCHED = "watched"
    VIEWED = "viewed"  # Community posts and stories; never analyzed


class ContentCategory(str, Enum):
    """Content categories assigned by the keyword categorizer.

    Declaration order matches rule evaluation order, with OTHER as the
    fallback bucket.
    """

    MUSIC = "music"
    GAMING = "gaming"
    EDUCATION = "education"
    ENTERTAINMENT = "entertainment"
    TECH = "tech"
    PODCASTS = "podcasts"
    NEWS = "news"
    SPORTS = "sports"
    OTHER = "other"
