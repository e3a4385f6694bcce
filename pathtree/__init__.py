"""Public package surface for pathtree.

Builds sorted, filterable, foldable trees from flat path lists and resolves
single/range/toggle selections over their visible rows.
"""

from __future__ import annotations

from loguru import logger

from .search import HighlightSegment, filter_paths, highlight_segments
from .tree_model import (
    PathEntry,
    StatusCode,
    TreeNode,
    TreeRow,
    aggregate_folder_status,
    build_tree,
    flatten_paths,
    visible_rows,
)
from .tree_pane import ClickModifiers, SelectionController, SelectionState, TreePanel, TreeStateController

# Debug logging stays silent unless an application enables it.
logger.disable("pathtree")


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "HighlightSegment",
    "PathEntry",
    "StatusCode",
    "TreeNode",
    "TreeRow",
    "ClickModifiers",
    "SelectionController",
    "SelectionState",
    "TreePanel",
    "TreeStateController",
    "aggregate_folder_status",
    "build_tree",
    "filter_paths",
    "flatten_paths",
    "highlight_segments",
    "visible_rows",
    "main",
]
