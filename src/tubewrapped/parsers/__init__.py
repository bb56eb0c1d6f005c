"""
Watch-history export parsers.
"""

from __future__ import annotations

from tubewrapped.parsers.watch_history_parser import (
    HtmlWatchHistoryFormat,
    JsonWatchHistoryFormat,
    WatchHistoryFormat,
    WatchHistoryParser,
    extract,
)

__all__ = [
    "HtmlWatchHistoryFormat",
    "JsonWatchHistoryFormat",
    "WatchHistoryFormat",
    "WatchHistoryParser",
    "extract",
]
