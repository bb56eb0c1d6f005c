"""
tubewrapped - Personal YouTube watch-history "Wrapped" analytics.

Parses a Google Takeout watch-history export and computes a yearly summary
of viewing habits: volume, top channels, temporal patterns, content
categories, binge sessions, rewatches and fun facts.
"""

from __future__ import annotations

__version__ = "0.3.0"
__author__ = "tubewrapped"
__email__ = "noreply@tubewrapped.dev"
__license__ = "AGPL-3.0-or-later"

__all__ = ["__version__", "__author__", "__email__", "__license__"]
