"""Case-insensitive substring filtering and match highlighting for path lists."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class HighlightSegment:
    text: str
    matched: bool = False


def normalize_query(query: str | None) -> str:
    """Return trimmed lowercase query; blank input yields ``""``."""
    if not query:
        return ""
    return query.strip().lower()


def filter_paths(paths: Sequence[str], query: str | None) -> Sequence[str]:
    """Keep paths whose full text contains ``query`` ignoring case.

    A blank query returns ``paths`` itself, unfiltered.
    """
    needle = normalize_query(query)
    if not needle:
        return paths
    return [path for path in paths if needle in path.lower()]


def highlight_segments(name: str, query: str | None) -> list[HighlightSegment]:
    """Split ``name`` into matched/unmatched spans for every query occurrence.

    Each occurrence becomes its own matched span; adjacent matches are not
    merged. Joining the span texts always reproduces ``name``.
    """
    if not name:
        return []
    needle = normalize_query(query)
    folded = name.lower()
    # Some characters change length when lowercased; offsets would drift.
    if not needle or len(folded) != len(name):
        return [HighlightSegment(name)]

    segments: list[HighlightSegment] = []
    cursor = 0
    while True:
        idx = folded.find(needle, cursor)
        if idx < 0:
            break
        if idx > cursor:
            segments.append(HighlightSegment(name[cursor:idx]))
        end = idx + len(needle)
        segments.append(HighlightSegment(name[idx:end], matched=True))
        cursor = end
    if cursor < len(name):
        segments.append(HighlightSegment(name[cursor:]))
    return segments
