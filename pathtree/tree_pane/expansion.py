"""Folder expansion state that survives rebuilds and search sessions."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from ..search import normalize_query

BROWSING = "browsing"
SEARCHING = "searching"


class TreeStateController:
    """Tracks manually expanded folders for one panel.

    While a search query is active every known folder reports as expanded;
    the manual set is left untouched so clearing the query restores it.
    """

    def __init__(self, auto_expand_top_level: bool = False) -> None:
        self.auto_expand_top_level = auto_expand_top_level
        self._expanded: set[str] = set()
        self._folder_paths: frozenset[str] = frozenset()
        self._has_manual_toggle = False
        self._mode = BROWSING

    @property
    def expanded(self) -> frozenset[str]:
        """Manually curated expansion set."""
        return frozenset(self._expanded)

    @property
    def folder_paths(self) -> frozenset[str]:
        return self._folder_paths

    @property
    def mode(self) -> str:
        return self._mode

    def sync(self, folder_paths: Iterable[str], top_level_folders: Iterable[str] = ()) -> None:
        """Adopt a rebuilt folder set, dropping expansion entries that vanished."""
        self._folder_paths = frozenset(folder_paths)
        stale = self._expanded - self._folder_paths
        if stale:
            logger.debug(f"[expansion] pruning {len(stale)} stale folder(s)")
            self._expanded -= stale
        if not self._expanded and self.auto_expand_top_level and not self._has_manual_toggle:
            self._expanded.update(path for path in top_level_folders if path in self._folder_paths)

    def observe_query(self, query: str | None) -> str:
        """Switch between browsing and searching modes from the current query."""
        self._mode = SEARCHING if normalize_query(query) else BROWSING
        return self._mode

    def toggle(self, path: str) -> bool:
        """Flip manual expansion for ``path``; returns whether it changed anything."""
        if path not in self._folder_paths:
            return False
        if self._mode == SEARCHING:
            logger.debug(f"[expansion] ignoring toggle of {path!r} while searching")
            return False
        self._has_manual_toggle = True
        if path in self._expanded:
            self._expanded.discard(path)
        else:
            self._expanded.add(path)
        return True

    def toggle_all(self, folder_paths: Iterable[str], target_expanded: bool) -> None:
        """Expand or collapse every known folder in ``folder_paths`` at once."""
        if self._mode == SEARCHING:
            return
        targets = {path for path in folder_paths if path in self._folder_paths}
        self._has_manual_toggle = True
        if target_expanded:
            self._expanded |= targets
        else:
            self._expanded -= targets

    def is_expanded(self, path: str, active_query: str | None = None) -> bool:
        """Return expansion for ``path``, forcing folders open while searching."""
        searching = bool(normalize_query(active_query)) if active_query is not None else self._mode == SEARCHING
        if searching:
            return path in self._folder_paths
        return path in self._expanded

    def all_expanded(self, folder_paths: Iterable[str]) -> bool:
        """True when at least one folder exists and every one is expanded."""
        paths = list(folder_paths)
        return bool(paths) and all(path in self._expanded for path in paths)
