"""
Tests for tubewrapped enums.
"""

from __future__ import annotations

import pytest

from tubewrapped.models.enums import ContentCategory, WatchAction


class TestWatchAction:
    """Test WatchAction enum."""

    def test_values(self):
        assert WatchAction.WATCHED.value == "watched"
        assert WatchAction.VIEWED.value == "viewed"

    def test_string_comparison(self):
        assert WatchAction.WATCHED == "watched"
        assert WatchAction("viewed") is WatchAction.VIEWED


class TestContentCategory:
    """Test ContentCategory enum."""

    def test_declaration_order(self):
        assert [c.value for c in ContentCategory] == [
            "music",
            "gaming",
            "education",
            "entertainment",
            "tech",
            "podcasts",
            "news",
            "sports",
            "other",
        ]

    def test_invalid_value(self):
        with pytest.raises(ValueError):
            ContentCategory("cooking")
