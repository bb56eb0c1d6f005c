"""
CLI interface module for tubewrapped.

Provides a Typer-based command-line interface for reading a watch-history
export and printing its yearly summary.
"""

from __future__ import annotations

__all__: list[str] = []
