"""
Tests for custom exceptions module.

This module tests the custom exception classes, their attributes and
inheritance hierarchy.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tubewrapped.exceptions import (
    ExtractionError,
    NoDataLoadedError,
    TubeWrappedError,
)


class TestTubeWrappedError:
    """Tests for base TubeWrappedError exception."""

    def test_base_error_with_message(self) -> None:
        """Test base error stores message correctly."""
        error = TubeWrappedError("Test error message")
        assert error.message == "Test error message"
        assert str(error) == "Test error message"

    def test_base_error_can_be_raised(self) -> None:
        with pytest.raises(TubeWrappedError, match="boom"):
            raise TubeWrappedError("boom")


class TestExtractionError:
    """Tests for ExtractionError exception."""

    def test_defaults(self) -> None:
        error = ExtractionError()
        assert error.message == "Failed to read watch history export"
        assert error.path is None

    def test_with_path(self) -> None:
        path = Path("Takeout/YouTube and YouTube Music/history/watch-history.html")
        error = ExtractionError("File not found", path=path)

        assert error.message == "File not found"
        assert error.path == path

    def test_inheritance(self) -> None:
        assert isinstance(ExtractionError(), TubeWrappedError)


class TestNoDataLoadedError:
    """Tests for NoDataLoadedError exception."""

    def test_default_message(self) -> None:
        error = NoDataLoadedError()
        assert "load()" in error.message
        assert isinstance(error, TubeWrappedError)
