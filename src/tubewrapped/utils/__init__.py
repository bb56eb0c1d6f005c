"""
Utility modules for tubewrapped.
"""

from __future__ import annotations
