"""Panel façade running one render cycle: filter, build, roll up, project.

Each ``TreePanel`` owns its controllers and memo cache; two panels never
share state.
"""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from loguru import logger

from ..runtime.config import PanelConfig
from ..search import filter_paths, normalize_query
from ..tree_model import (
    BuildResult,
    PathEntry,
    StatusCode,
    TreeRow,
    aggregate_folder_status,
    build_tree,
    row_order,
    split_path,
    visible_rows,
)
from .expansion import TreeStateController
from .selection import PLAIN_CLICK, ClickModifiers, SelectionController, SelectionState

TREE_SNAPSHOT_CACHE_MAX = 16


@dataclass(frozen=True)
class TreeSnapshot:
    """Memoized result of filtering and building one path list."""

    query: str
    paths: tuple[str, ...]
    tree: BuildResult
    folder_status: dict[str, StatusCode] = field(default_factory=dict)


class TreePanel:
    """One file-tree or changed-files panel."""

    def __init__(self, config: PanelConfig | None = None) -> None:
        self.config = config or PanelConfig()
        self.expansion = TreeStateController(auto_expand_top_level=self.config.auto_expand_top_level)
        self.selection = SelectionController()
        self._paths: tuple[str, ...] = ()
        self._leaf_status: dict[str, StatusCode] = {}
        self._query = ""
        self._cache: OrderedDict[tuple[tuple[str, ...], str, tuple[tuple[str, str], ...]], TreeSnapshot] = OrderedDict()

    @property
    def query(self) -> str:
        return self._query

    @property
    def paths(self) -> tuple[str, ...]:
        return self._paths

    @property
    def leaf_status(self) -> dict[str, StatusCode]:
        return dict(self._leaf_status)

    @property
    def is_searching(self) -> bool:
        return bool(self._query)

    def set_entries(self, entries: Iterable[PathEntry | str]) -> None:
        """Replace the panel's path list, reconciling expansion and selection.

        Paths are stored in normalized form (empty segments dropped) so that
        statuses line up with the node paths the builder produces.
        """
        paths: list[str] = []
        leaf_status: dict[str, StatusCode] = {}
        for entry in entries:
            raw_path, status = (entry.path, entry.status) if isinstance(entry, PathEntry) else (entry, None)
            path = "/".join(split_path(raw_path))
            if not path:
                continue
            paths.append(path)
            code = StatusCode.coerce(status)
            if code is not None:
                leaf_status[path] = code
        self._paths = tuple(paths)
        self._leaf_status = leaf_status

        full = self._snapshot_for("")
        top_level = [node.path for node in full.tree.nodes if node.is_folder]
        self.expansion.sync(full.tree.folder_paths, top_level_folders=top_level)
        self.selection.sync_rows(self._paths)

    def set_query(self, query: str | None) -> None:
        self._query = normalize_query(query)
        self.expansion.observe_query(self._query)

    def _status_key(self) -> tuple[tuple[str, str], ...]:
        return tuple(sorted((path, status.value) for path, status in self._leaf_status.items()))

    def _snapshot_for(self, query: str) -> TreeSnapshot:
        key = (self._paths, query, self._status_key())
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            return cached

        logger.debug(f"[panel] building tree for {len(self._paths)} path(s), query={query!r}")
        filtered = tuple(filter_paths(self._paths, query))
        tree = build_tree(filtered)
        snapshot = TreeSnapshot(
            query=query,
            paths=filtered,
            tree=tree,
            folder_status=aggregate_folder_status(tree.nodes, self._leaf_status),
        )
        self._cache[key] = snapshot
        self._cache.move_to_end(key)
        while len(self._cache) > TREE_SNAPSHOT_CACHE_MAX:
            self._cache.popitem(last=False)
        return snapshot

    def snapshot(self) -> TreeSnapshot:
        """Return the tree for the current paths and query."""
        return self._snapshot_for(self._query)

    def rows(self) -> list[TreeRow]:
        snapshot = self.snapshot()
        return visible_rows(
            snapshot.tree.nodes,
            lambda path: self.expansion.is_expanded(path, self._query),
            leaf_status=self._leaf_status,
            folder_status=snapshot.folder_status,
        )

    def order(self) -> list[str]:
        return row_order(self.rows())

    @property
    def file_count(self) -> int:
        """Number of listed paths after filtering."""
        return len(self.snapshot().paths)

    @property
    def match_count(self) -> int:
        """Number of paths matching the active query; 0 while browsing."""
        if not self._query:
            return 0
        return len(self.snapshot().paths)

    def toggle(self, path: str) -> bool:
        return self.expansion.toggle(path)

    def toggle_all(self, target_expanded: bool) -> None:
        self.expansion.toggle_all(self.snapshot().tree.folder_paths, target_expanded)

    def all_expanded(self) -> bool:
        return self.expansion.all_expanded(self.snapshot().tree.folder_paths)

    def click(self, path: str | None, modifiers: ClickModifiers = PLAIN_CLICK) -> SelectionState:
        return self.selection.resolve_click(path, self.order(), modifiers)

    def click_empty(self) -> SelectionState:
        return self.selection.reset()

    def context_targets(self, path: str) -> list[str]:
        return self.selection.context_targets(path, self.order())

    def selected_in_order(self, paths: Sequence[str] | None = None) -> list[str]:
        """Selected paths in visible order, for bulk-action collaborators."""
        order = list(paths) if paths is not None else self.order()
        selected = self.selection.selected
        return [path for path in order if path in selected]
