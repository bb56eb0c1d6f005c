"""
Watch event model.

A WatchEvent is one "Watched" record extracted from a watch-history export.
Calendar fields used by the analytics (year, month, weekday, hour) are
derived from the UTC timestamp once and cached on the instance.
"""

from __future__ import annotations

from datetime import datetime, timezone
from functools import cached_property

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .enums import WatchAction

UNKNOWN_CHANNEL = "Unknown Channel"
"""Channel name used when an entry has no channel link."""


class WatchEvent(BaseModel):
    """
    A single watched video from the export.

    Derived fields follow the conventions of the watch-history report:
    ``month`` is zero-based (0 = January) and ``day_of_week`` counts from
    Sunday (0 = Sunday, 6 = Saturday).
    """

    model_config = ConfigDict(frozen=True)

    action: WatchAction = Field(WatchAction.WATCHED, description="Recorded action")
    video_id: str = Field(..., min_length=1, description="YouTube video ID")
    video_url: str = Field(..., description="Link to the watched video")
    title: str = Field(..., min_length=1, description="Video title")
    channel_id: str = Field("", description="Channel ID, empty when unknown")
    channel_name: str = Field(UNKNOWN_CHANNEL, description="Channel display name")
    timestamp: datetime = Field(..., description="When the video was watched (UTC)")

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        """Normalize to whole-second UTC; naive values are taken as UTC."""
        if v.tzinfo is None:
            v = v.replace(tzinfo=timezone.utc)
        else:
            v = v.astimezone(timezone.utc)
        return v.replace(microsecond=0)

    @computed_field  # type: ignore[prop-decorator]
    @cached_property
    def year(self) -> int:
        return self.timestamp.year

    @computed_field  # type: ignore[prop-decorator]
    @cached_property
    def month(self) -> int:
        return self.timestamp.month - 1

    @computed_field  # type: ignore[prop-decorator]
    @cached_property
    def day_of_week(self) -> int:
        # datetime.weekday() is Monday-based
        return (self.timestamp.weekday() + 1) % 7

    @computed_field  # type: ignore[prop-decorator]
    @cached_property
    def day_of_month(self) -> int:
        return self.timestamp.day

    @computed_field  # type: ignore[prop-decorator]
    @cached_property
    def hour(self) -> int:
        return self.timestamp.hour

    @computed_field  # type: ignore[prop-decorator]
    @cached_property
    def date_key(self) -> str:
        """ISO calendar date (YYYY-MM-DD) of the event in UTC."""
        return self.timestamp.date().isoformat()

    @property
    def is_weekday(self) -> bool:
        """Monday through Friday."""
        return 1 <= self.day_of_week <= 5
