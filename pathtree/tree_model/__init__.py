"""Path-tree construction, status roll-up, and row projection.

Turns flat ``/``-joined path lists into sorted ``TreeNode`` hierarchies,
rolls file statuses up into folders, and flattens trees into the visible
rows a panel renders.
"""

from __future__ import annotations

from .build import build_tree, split_path
from .rows import count_files, flatten_paths, iter_nodes, row_order, visible_rows
from .status import (
    STATUS_PRIORITY,
    aggregate_folder_status,
    entries_from_paths,
    entries_from_porcelain,
    higher_status,
    status_map,
    status_symbol,
)
from .types import FILE, FOLDER, BuildResult, NodeKind, PathEntry, StatusCode, TreeNode, TreeRow

__all__ = [
    "FILE",
    "FOLDER",
    "BuildResult",
    "NodeKind",
    "PathEntry",
    "StatusCode",
    "TreeNode",
    "TreeRow",
    "STATUS_PRIORITY",
    "build_tree",
    "split_path",
    "aggregate_folder_status",
    "higher_status",
    "status_map",
    "status_symbol",
    "entries_from_paths",
    "entries_from_porcelain",
    "iter_nodes",
    "flatten_paths",
    "count_files",
    "visible_rows",
    "row_order",
]
