"""Utility functions for parsing and formatting.

This package includes helpers for ISO 8601 date parsing and the fixed
offset conversion applied to extracted posts.
"""

from .date_parser import parse_iso8601, to_display_time

__all__ = [
    "parse_iso8601",
    "to_display_time",
]
