"""
Configuration management module for tubewrapped.

Handles application settings, environment variables and the tunable
thresholds used by the analytics pipeline.
"""

from __future__ import annotations

__all__: list[str] = []
