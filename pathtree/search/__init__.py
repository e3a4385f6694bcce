"""Path-list search: substring filtering and highlight spans."""

from __future__ import annotations

from .filter import HighlightSegment, filter_paths, highlight_segments, normalize_query

__all__ = [
    "HighlightSegment",
    "filter_paths",
    "highlight_segments",
    "normalize_query",
]
