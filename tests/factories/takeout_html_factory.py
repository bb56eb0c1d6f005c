"""
Builders for Google Takeout watch-history documents.

Produces HTML shaped like ``watch-history.html`` (one outer cell per
activity, holding a header cell and three content cells) and JSON shaped
like ``watch-history.json`` for parser tests.
"""

from __future__ import annotations

import json
from html import escape
from typing import Any, Dict, List, Optional

DEFAULT_TIMESTAMP = "15 Jan 2025, 08:30:00 GMT"


def watch_entry_html(
    video_id: Optional[str] = "dQw4w9WgXcQ",
    title: str = "Never Gonna Give You Up",
    channel_id: Optional[str] = "UCuAXFkgsw1L7xaCfnd5JJOw",
    channel_name: str = "Rick Astley",
    timestamp: Optional[str] = DEFAULT_TIMESTAMP,
    action: str = "Watched",
    video_url: Optional[str] = None,
    metadata_html: str = "",
) -> str:
    """One activity block: header cell plus the three content cells."""
    if video_url is None and video_id is not None:
        video_url = f"https://www.youtube.com/watch?v={video_id}"

    body = f"{action}&nbsp;"
    if video_url is not None:
        body += f'<a href="{escape(video_url)}">{escape(title)}</a><br>'
    else:
        body += f"{escape(title)}<br>"
    if channel_id is not None:
        body += (
            f'<a href="https://www.youtube.com/channel/{channel_id}">'
            f"{escape(channel_name)}</a><br>"
        )
    if timestamp is not None:
        body += f"{timestamp}<br>"

    metadata = metadata_html or (
        "<b>Products:</b><br>&emsp;YouTube<br>"
        "<b>Why is this here?</b><br>&emsp;This activity was saved to your "
        "Google Account because the following settings were on:&nbsp;"
        "YouTube watch history.<br>"
    )

    return (
        '<div class="outer-cell mdl-cell mdl-cell--12-col mdl-shadow--2dp">'
        '<div class="mdl-grid">'
        '<div class="header-cell mdl-cell mdl-cell--12-col">'
        '<p class="mdl-typography--title">YouTube<br></p></div>'
        '<div class="content-cell mdl-cell mdl-cell--6-col mdl-typography--body-1">'
        f"{body}</div>"
        '<div class="content-cell mdl-cell mdl-cell--6-col '
        'mdl-typography--body-1 mdl-typography--text-right"></div>'
        '<div class="content-cell mdl-cell mdl-cell--12-col '
        f'mdl-typography--caption">{metadata}</div>'
        "</div></div>"
    )


def visited_entry_html(
    url: str = "https://www.example.com/", timestamp: str = DEFAULT_TIMESTAMP
) -> str:
    """A non-video activity, e.g. a visited website."""
    return watch_entry_html(
        video_id=None,
        video_url=url,
        title="example.com",
        channel_id=None,
        action="Visited",
        timestamp=timestamp,
    )


def takeout_document(*entries: str) -> str:
    """Wrap activity blocks in the surrounding Takeout page."""
    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\">"
        "<title>History</title></head><body>"
        '<div class="mdl-grid">' + "".join(entries) + "</div></body></html>"
    )


def json_watch_record(
    video_id: Optional[str] = "dQw4w9WgXcQ",
    title: str = "Never Gonna Give You Up",
    channel_id: Optional[str] = "UCuAXFkgsw1L7xaCfnd5JJOw",
    channel_name: str = "Rick Astley",
    time: Optional[str] = "2025-01-15T08:30:00.000Z",
    action: str = "Watched",
    header: str = "YouTube",
) -> Dict[str, Any]:
    """One record of ``watch-history.json``."""
    record: Dict[str, Any] = {
        "header": header,
        "title": f"{action} {title}",
        "products": ["YouTube"],
        "activityControls": ["YouTube watch history"],
    }
    if video_id is not None:
        record["titleUrl"] = f"https://www.youtube.com/watch?v={video_id}"
    if channel_id is not None:
        record["subtitles"] = [
            {
                "name": channel_name,
                "url": f"https://www.youtube.com/channel/{channel_id}",
            }
        ]
    if time is not None:
        record["time"] = time
    return record


def json_document(*records: Dict[str, Any]) -> str:
    return json.dumps(list(records), indent=2)


def sample_entries() -> List[str]:
    """A small mixed export: two watches, a view, and a visited site."""
    return [
        watch_entry_html(
            video_id="bbbbbbbbbbb",
            title="Second watched",
            timestamp="16 Jan 2025, 09:00:00 GMT",
        ),
        watch_entry_html(
            video_id="ccccccccccc",
            title="A community post",
            action="Viewed",
            timestamp="15 Jan 2025, 10:00:00 GMT",
        ),
        watch_entry_html(
            video_id="aaaaaaaaaaa",
            title="First watched",
            timestamp="15 Jan 2025, 08:30:00 GMT",
        ),
        visited_entry_html(),
    ]
