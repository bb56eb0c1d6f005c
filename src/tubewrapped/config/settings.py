"""
Application settings and configuration management.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from tubewrapped import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="tubewrapped")
    app_version: str = Field(default=__version__)
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Volume estimation
    minutes_per_video: int = Field(default=10)

    # Binge detection
    binge_gap_minutes: int = Field(default=120)
    binge_min_videos: int = Field(default=5)
    rabbit_hole_min_videos: int = Field(default=10)

    # Rewatches and fun facts
    comfort_channel_limit: int = Field(default=3)
    milestone_video_number: int = Field(default=1000)

    # Display
    default_top_channels: int = Field(default=10)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator(
        "minutes_per_video",
        "binge_gap_minutes",
        "binge_min_videos",
        "rabbit_hole_min_videos",
        "comfort_channel_limit",
        "milestone_video_number",
        "default_top_channels",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Thresholds and limits must be positive."""
        if v <= 0:
            raise ValueError(f"Value must be positive, got {v}")
        return v

    model_config = {
        "env_prefix": "TUBEWRAPPED_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()


# Global settings instance
settings = get_settings()
