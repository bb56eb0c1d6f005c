"""
Pytest configuration and fixtures for tubewrapped tests.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from tests.factories.takeout_html_factory import sample_entries, takeout_document
from tubewrapped.config.settings import Settings


@pytest.fixture
def test_settings():
    """Settings with the default analytics thresholds."""
    return Settings(log_level="WARNING")


@pytest.fixture
def jan_1_2025():
    """Wednesday 1 January 2025, 10:00 UTC."""
    return datetime(2025, 1, 1, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_html():
    """Small HTML export with two watches, one view and one visited site."""
    return takeout_document(*sample_entries())


@pytest.fixture
def sample_html_file(tmp_path: Path, sample_html: str) -> Path:
    path = tmp_path / "watch-history.html"
    path.write_text(sample_html, encoding="utf-8")
    return path
