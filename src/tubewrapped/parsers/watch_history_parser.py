"""
Google Takeout watch-history parser.

Extracts "Watched" events from a YouTube watch-history export. The export
grammar is tied to one specific Takeout layout, so each supported layout is
isolated behind a WatchHistoryFormat:

- HtmlWatchHistoryFormat: the default ``watch-history.html`` export. Entries
  are ``.content-cell`` blocks in groups of three, of which only the first
  carries the activity text, video link, channel link and timestamp.
- JsonWatchHistoryFormat: the ``watch-history.json`` export, selected when
  "JSON" is chosen for My Activity in Takeout.

Extraction is best-effort. Entries that lack a Watched action, a video link
or a timestamp are skipped, an entry that raises is logged and skipped, and
a document-level failure returns whatever was parsed before it.
"""

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from collections import Counter
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Iterator, List, Optional, Sequence, Tuple, Union
from urllib.parse import parse_qs, urlparse

from bs4 import BeautifulSoup, Tag

from tubewrapped.exceptions import ExtractionError
from tubewrapped.models.analytics import ExtractionSummary
from tubewrapped.models.enums import WatchAction
from tubewrapped.models.watch_event import UNKNOWN_CHANNEL, WatchEvent

logger = logging.getLogger(__name__)

# Activity verb directly followed by the video link, e.g. "Watched&nbsp;<a ..."
_ACTION_RE = re.compile(r"(Watched|Viewed)(?:\s|&nbsp;)+<a")

# e.g. "15 Jan 2025, 08:30:00 GMT"
_TIMESTAMP_RE = re.compile(
    r"(\d{1,2})\s+(\w+)\s+(\d{4}),\s+(\d{2}):(\d{2}):(\d{2})\s+GMT"
)

# English month names, independent of the process locale
# fmt: off
_MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
# fmt: on
_MONTHS = {
    **{name: number for number, name in enumerate(_MONTH_NAMES, start=1)},
    **{name[:3]: number for number, name in enumerate(_MONTH_NAMES, start=1)},
}


class SkipReason(str, Enum):
    """Why an export entry did not produce a watch event."""

    NO_ACTION = "no_action"
    VIEWED = "viewed"
    NO_VIDEO = "no_video"
    NO_TIMESTAMP = "no_timestamp"


EntryResult = Union[WatchEvent, SkipReason]


def extract_video_id(url: Optional[str]) -> Optional[str]:
    """
    Extract the video ID from the ``v`` query parameter of a watch URL.

    - https://www.youtube.com/watch?v=VIDEO_ID
    - https://music.youtube.com/watch?v=VIDEO_ID&list=...
    """
    if not url:
        return None

    query_params = parse_qs(urlparse(url).query)
    video_id = query_params.get("v", [None])[0]
    return video_id or None


def extract_channel_id(url: Optional[str]) -> Optional[str]:
    """
    Extract the channel ID from a ``/channel/CHANNEL_ID`` URL.

    Custom URLs and handles (/c/NAME, /@handle) carry no channel ID.
    """
    if not url or "/channel/" not in url:
        return None

    channel_id = url.split("/channel/", 1)[1].split("/")[0].split("?")[0]
    return channel_id or None


def parse_action(markup: str) -> Optional[WatchAction]:
    """Find the activity verb that precedes the first link in an entry."""
    match = _ACTION_RE.search(markup)
    if not match:
        return None
    return WatchAction(match.group(1).lower())


def parse_timestamp(text: str) -> Optional[datetime]:
    """
    Find and parse a ``D Mon YYYY, HH:MM:SS GMT`` timestamp.

    Abbreviated and full English month names are accepted in any case,
    whatever the process locale. Returns an aware UTC datetime, or None when
    no valid timestamp is present.
    """
    match = _TIMESTAMP_RE.search(text)
    if not match:
        return None

    day, month_name, year, hour, minute, second = match.groups()
    month = _MONTHS.get(month_name.lower())
    if month is None:
        return None
    try:
        return datetime(
            int(year),
            month,
            int(day),
            int(hour),
            int(minute),
            int(second),
            tzinfo=timezone.utc,
        )
    except ValueError:
        return None


class WatchHistoryFormat(ABC):
    """One export layout: how to find entries and turn each into an event."""

    name: str = ""

    @abstractmethod
    def matches(self, text: str) -> bool:
        """Whether this format should be used for the given document."""

    @abstractmethod
    def iter_entries(self, text: str) -> Iterator[Any]:
        """Yield candidate entries from the document."""

    @abstractmethod
    def parse_entry(self, entry: Any) -> EntryResult:
        """Turn one candidate entry into a WatchEvent or a SkipReason."""


class HtmlWatchHistoryFormat(WatchHistoryFormat):
    """
    The ``watch-history.html`` export.

    Each activity is an outer cell holding three ``.content-cell`` blocks:
    the activity text, an empty right-hand cell, and the product/why
    metadata. Only every third block is read so that metadata cells are
    never counted as entries.
    """

    name = "html"

    CELL_SELECTOR = ".content-cell"
    CELL_STRIDE = 3
    VIDEO_LINK_SELECTOR = 'a[href*="watch?v="]'
    CHANNEL_LINK_SELECTOR = 'a[href*="/channel/"]'

    def matches(self, text: str) -> bool:
        return True

    def iter_entries(self, text: str) -> Iterator[Tag]:
        soup = BeautifulSoup(text, "html.parser")
        cells = soup.select(self.CELL_SELECTOR)
        for i in range(0, len(cells), self.CELL_STRIDE):
            yield cells[i]

    def parse_entry(self, entry: Tag) -> EntryResult:
        markup = entry.decode_contents()

        action = parse_action(markup)
        if action is None:
            return SkipReason.NO_ACTION
        if action is not WatchAction.WATCHED:
            return SkipReason.VIEWED

        video_link = entry.select_one(self.VIDEO_LINK_SELECTOR)
        if video_link is None:
            return SkipReason.NO_VIDEO
        video_url = str(video_link.get("href", ""))
        video_id = extract_video_id(video_url)
        if not video_id:
            return SkipReason.NO_VIDEO

        channel_name = UNKNOWN_CHANNEL
        channel_id = ""
        channel_link = entry.select_one(self.CHANNEL_LINK_SELECTOR)
        if channel_link is not None:
            channel_name = channel_link.get_text().strip() or UNKNOWN_CHANNEL
            channel_id = extract_channel_id(str(channel_link.get("href", ""))) or ""

        timestamp = parse_timestamp(markup)
        if timestamp is None:
            return SkipReason.NO_TIMESTAMP

        return WatchEvent(
            action=action,
            video_id=video_id,
            video_url=video_url,
            title=video_link.get_text().strip() or video_url,
            channel_id=channel_id,
            channel_name=channel_name,
            timestamp=timestamp,
        )


class JsonWatchHistoryFormat(WatchHistoryFormat):
    """
    The ``watch-history.json`` export.

    A JSON array of activity records::

        {
          "header": "YouTube",
          "title": "Watched Never Gonna Give You Up",
          "titleUrl": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
          "subtitles": [{"name": "Rick Astley", "url": "https://www.youtube.com/channel/UC..."}],
          "time": "2025-01-15T08:30:00.123Z"
        }
    """

    name = "json"

    def matches(self, text: str) -> bool:
        return text.lstrip().startswith("[")

    def iter_entries(self, text: str) -> Iterator[Any]:
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError(
                f"Expected JSON array at root level, got {type(data).__name__}"
            )
        yield from data

    @staticmethod
    def split_title(title: str) -> Tuple[Optional[WatchAction], str]:
        """
        Split the action prefix from a JSON activity title.

        Returns (action, clean_title); action is None when there is no
        recognised prefix.
        """
        title = title.strip()
        if title.startswith("Watched "):
            return (WatchAction.WATCHED, title[8:].strip())
        elif title.startswith("Viewed "):
            return (WatchAction.VIEWED, title[7:].strip())
        return (None, title)

    def parse_entry(self, entry: Any) -> EntryResult:
        if not isinstance(entry, dict) or entry.get("header") != "YouTube":
            return SkipReason.NO_ACTION

        action, title = self.split_title(entry.get("title", ""))
        if action is None:
            return SkipReason.NO_ACTION
        if action is not WatchAction.WATCHED:
            return SkipReason.VIEWED

        video_url = entry.get("titleUrl", "")
        video_id = extract_video_id(video_url)
        if not video_id:
            return SkipReason.NO_VIDEO

        channel_name = UNKNOWN_CHANNEL
        channel_id = ""
        subtitles = entry.get("subtitles") or []
        if isinstance(subtitles, list) and subtitles:
            subtitle = subtitles[0]
            channel_name = (subtitle.get("name") or "").strip() or UNKNOWN_CHANNEL
            channel_id = extract_channel_id(subtitle.get("url")) or ""

        time_str = entry.get("time", "")
        try:
            timestamp = datetime.fromisoformat(time_str.replace("Z", "+00:00"))
        except (AttributeError, ValueError):
            return SkipReason.NO_TIMESTAMP

        return WatchEvent(
            action=action,
            video_id=video_id,
            video_url=video_url,
            title=title or video_url,
            channel_id=channel_id,
            channel_name=channel_name,
            timestamp=timestamp,
        )


class WatchHistoryParser:
    """
    Parser for Google Takeout watch-history exports.

    Picks the first registered format that matches the document (JSON
    arrays, otherwise HTML) and extracts a chronologically sorted list of
    watch events.

    Parameters
    ----------
    formats : Sequence[WatchHistoryFormat], optional
        Formats to try, in order. Defaults to JSON then HTML.

    Examples
    --------
    >>> parser = WatchHistoryParser()
    >>> events = parser.extract(Path("watch-history.html").read_text())
    >>> events[0].timestamp <= events[-1].timestamp
    True
    """

    def __init__(self, formats: Optional[Sequence[WatchHistoryFormat]] = None) -> None:
        self.formats: List[WatchHistoryFormat] = list(
            formats
            if formats is not None
            else (JsonWatchHistoryFormat(), HtmlWatchHistoryFormat())
        )

    def detect_format(self, text: str) -> WatchHistoryFormat:
        """Return the first format that claims the document."""
        for fmt in self.formats:
            if fmt.matches(text):
                return fmt
        # Fall back to the last registered format
        return self.formats[-1]

    def extract(self, text: str) -> List[WatchEvent]:
        """
        Extract watch events from raw export text.

        Parameters
        ----------
        text : str
            Full content of a watch-history export.

        Returns
        -------
        List[WatchEvent]
            Watched events in ascending timestamp order. Ties keep document
            order. Empty when nothing qualifies.
        """
        events, _ = self.extract_with_summary(text)
        return events

    def count_entries(self, text: str) -> ExtractionSummary:
        """Count how each entry in the export was handled."""
        _, summary = self.extract_with_summary(text)
        return summary

    def extract_with_summary(
        self, text: str
    ) -> Tuple[List[WatchEvent], ExtractionSummary]:
        """Extract events and report how every candidate entry was handled."""
        fmt = self.detect_format(text)
        counts: Counter[str] = Counter()
        events: List[WatchEvent] = []

        try:
            for i, entry in enumerate(fmt.iter_entries(text)):
                counts["entries"] += 1
                try:
                    result = fmt.parse_entry(entry)
                except Exception as e:
                    # Log error but continue processing
                    counts["errors"] += 1
                    logger.warning(f"Failed to parse {fmt.name} entry {i}: {e}")
                    continue

                if isinstance(result, SkipReason):
                    counts[result.value] += 1
                    logger.debug(f"Skipped {fmt.name} entry {i}: {result.value}")
                    continue

                events.append(result)
        except Exception as e:
            logger.error(
                f"Stopped reading {fmt.name} export after {counts['entries']} "
                f"entries: {e}"
            )

        # sorted() is stable, so equal timestamps keep document order
        events = sorted(events, key=lambda event: event.timestamp)

        summary = ExtractionSummary(
            format_name=fmt.name,
            entries=counts["entries"],
            viewed=counts[SkipReason.VIEWED.value],
            skipped_no_action=counts[SkipReason.NO_ACTION.value],
            skipped_no_video=counts[SkipReason.NO_VIDEO.value],
            skipped_no_timestamp=counts[SkipReason.NO_TIMESTAMP.value],
            errors=counts["errors"],
            events=len(events),
        )
        logger.info(
            f"Extracted {summary.events} watch events from "
            f"{summary.entries} {fmt.name} entries"
        )
        return events, summary

    @staticmethod
    def read_file(file_path: Path) -> str:
        """
        Read an export file as UTF-8 text.

        Raises
        ------
        ExtractionError
            If the file is missing, unreadable or not valid UTF-8.
        """
        try:
            return Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ExtractionError(
                message=f"Failed to read export file {file_path}: {e}",
                path=Path(file_path),
            ) from e

    def parse_file(self, file_path: Path) -> List[WatchEvent]:
        """Read an export file from disk and extract its watch events."""
        return self.extract(self.read_file(file_path))


_default_parser = WatchHistoryParser()


def extract(text: str) -> List[WatchEvent]:
    """Extract watch events from export text using the default formats."""
    return _default_parser.extract(text)
