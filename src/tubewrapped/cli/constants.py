"""
CLI constants for tubewrapped.

This module provides shared constants for CLI commands including:
- Exit codes following Unix conventions
- Table display limits for consistent output
- Format strings for CLI output formatting
"""

from __future__ import annotations

from typing import Final

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_SUCCESS: Final[int] = 0
"""Operation completed normally."""

EXIT_USER_ERROR: Final[int] = 1
"""
User error: unreadable export, no watch events, invalid option.
"""

EXIT_SYSTEM_ERROR: Final[int] = 2
"""System error: unexpected internal exception."""

# =============================================================================
# Table Display Limits
# =============================================================================

MAX_TABLE_ROWS: Final[int] = 10
"""Maximum rows to display in summary tables."""

MAX_TITLE_WIDTH: Final[int] = 50
"""Maximum width for title columns in tables (characters)."""

MAX_CHANNEL_WIDTH: Final[int] = 30
"""Maximum width for channel name columns in tables (characters)."""

# =============================================================================
# Format Strings
# =============================================================================

DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S UTC"
"""Standard datetime format for CLI output."""

DATE_FORMAT: Final[str] = "%Y-%m-%d"
"""Standard date format for CLI output."""

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
"""Format for log records written to the console."""

DAY_NAMES: Final[tuple[str, ...]] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
"""Weekday names indexed from Sunday, matching WatchEvent.day_of_week."""

MONTH_NAMES: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
"""Month names indexed from 0, matching WatchEvent.month."""
