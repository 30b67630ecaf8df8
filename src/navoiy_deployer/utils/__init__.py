"""Utility functions."""

from .datetime import current_year, now_utc, to_iso

__all__ = [
    "current_year",
    "now_utc",
    "to_iso",
]
