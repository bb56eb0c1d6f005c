"""
Wrapped service.

Ties the pipeline together for an interactive caller: the export is parsed
once and its events are cached, while reports are computed per year on
demand and cached so that switching between years never re-parses the
document.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Dict, List, Optional

from ..config.settings import Settings
from ..config.settings import settings as default_settings
from ..exceptions import NoDataLoadedError
from ..models.analytics import AnalyticsReport, ExtractionSummary
from ..models.watch_event import WatchEvent
from ..parsers.watch_history_parser import WatchHistoryParser
from .analytics_service import calculate_analytics
from .event_filter import available_years, filter_by_year

logger = logging.getLogger(__name__)


class WrappedService:
    """
    Per-export cache of watch events and yearly analytics reports.

    Instances are not shared between exports or users; each holds the
    events of the most recently loaded document only.

    Parameters
    ----------
    config : Settings, optional
        Analytics thresholds; defaults to the application settings.
    parser : WatchHistoryParser, optional
        Parser used for extraction; defaults to a parser with all formats.

    Examples
    --------
    >>> service = WrappedService()
    >>> service.load(Path("watch-history.html").read_text())
    >>> report = service.report_for_year(2025)
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        parser: Optional[WatchHistoryParser] = None,
    ) -> None:
        self.config = config or default_settings
        self.parser = parser or WatchHistoryParser()
        self._content_digest: Optional[str] = None
        self._events: List[WatchEvent] = []
        self._summary: Optional[ExtractionSummary] = None
        self._reports: Dict[int, Optional[AnalyticsReport]] = {}

    @staticmethod
    def _digest(content: str) -> str:
        return hashlib.sha256(content.encode("utf-8")).hexdigest()

    @property
    def is_loaded(self) -> bool:
        return self._content_digest is not None

    def load(self, content: str) -> List[WatchEvent]:
        """
        Extract and cache the events of an export.

        Loading the same content again returns the cached events without
        parsing. New content replaces the events and drops cached reports.
        """
        digest = self._digest(content)
        if digest == self._content_digest:
            logger.debug("Export unchanged, reusing cached watch events")
            return list(self._events)

        events, summary = self.parser.extract_with_summary(content)
        self._content_digest = digest
        self._events = events
        self._summary = summary
        self._reports = {}
        return list(events)

    def _require_loaded(self) -> None:
        if not self.is_loaded:
            raise NoDataLoadedError()

    @property
    def events(self) -> List[WatchEvent]:
        self._require_loaded()
        return list(self._events)

    def summary(self) -> ExtractionSummary:
        """How the loaded export's entries were handled."""
        self._require_loaded()
        assert self._summary is not None
        return self._summary

    def available_years(self) -> List[int]:
        self._require_loaded()
        return available_years(self._events)

    def report_for_year(self, year: Optional[int] = None) -> Optional[AnalyticsReport]:
        """
        Analytics for one calendar year of the loaded export.

        Parameters
        ----------
        year : int, optional
            Year to report on; defaults to the most recent year present.

        Returns
        -------
        Optional[AnalyticsReport]
            The report, or None when the year has no watch events.

        Raises
        ------
        NoDataLoadedError
            If no export has been loaded.
        """
        self._require_loaded()

        if year is None:
            years = available_years(self._events)
            if not years:
                return None
            year = years[-1]

        if year not in self._reports:
            logger.debug(f"Computing analytics for {year}")
            self._reports[year] = calculate_analytics(
                filter_by_year(self._events, year), self.config
            )
        return self._reports[year]
