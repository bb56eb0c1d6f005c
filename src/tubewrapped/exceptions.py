"""
Custom exceptions for the tubewrapped application.

The analytics core never raises on malformed export content: bad blocks are
skipped and empty input yields an empty result. These exceptions cover the
caller-side concerns around it, such as reading the export from disk.
"""

from __future__ import annotations

from pathlib import Path


class TubeWrappedError(Exception):
    """Base exception for all tubewrapped errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize TubeWrappedError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class ExtractionError(TubeWrappedError):
    """
    Exception raised when an export file cannot be read.

    Attributes
    ----------
    message : str
        Human-readable error message.
    path : Path | None
        The file that failed to load.

    Examples
    --------
    >>> try:
    ...     events = WatchHistoryParser().parse_file(Path("watch-history.html"))
    ... except ExtractionError as e:
    ...     print(f"Could not read {e.path}: {e.message}")
    """

    def __init__(
        self,
        message: str = "Failed to read watch history export",
        path: Path | None = None,
    ) -> None:
        """
        Initialize ExtractionError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message.
        path : Path | None, optional
            The file that failed to load (default: None).
        """
        self.path = path
        super().__init__(message)


class NoDataLoadedError(TubeWrappedError):
    """Raised when a report is requested before any export was loaded."""

    def __init__(
        self, message: str = "No watch history loaded; call load() first"
    ) -> None:
        super().__init__(message)
