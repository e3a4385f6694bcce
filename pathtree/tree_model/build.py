"""Path-list to nested tree construction.

Insertion runs over a mutable map keyed by segment name; once every path
is walked, the map is converted once into sorted immutable ``TreeNode``
tuples.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .types import FILE, FOLDER, BuildResult, NodeKind, TreeNode


@dataclass
class _BuildNode:
    name: str
    path: str
    kind: NodeKind
    children: dict[str, _BuildNode] = field(default_factory=dict)


def split_path(path: str) -> list[str]:
    """Split ``path`` on ``/`` dropping empty segments."""
    return [segment for segment in path.split("/") if segment]


def _add_node(children: dict[str, _BuildNode], name: str, path: str, kind: NodeKind) -> _BuildNode:
    existing = children.get(name)
    if existing is not None:
        # Folder membership wins over file membership.
        if kind == FOLDER:
            existing.kind = FOLDER
        return existing
    node = _BuildNode(name=name, path=path, kind=kind)
    children[name] = node
    return node


def _child_sort_key(node: TreeNode) -> tuple[bool, str]:
    """Sort folders before files and then by case-sensitive name."""
    return (node.kind != FOLDER, node.name)


def _freeze(children: dict[str, _BuildNode], folder_paths: set[str]) -> tuple[TreeNode, ...]:
    nodes: list[TreeNode] = []
    for node in children.values():
        if node.kind == FOLDER:
            folder_paths.add(node.path)
            frozen_children = _freeze(node.children, folder_paths)
        else:
            frozen_children = ()
        nodes.append(TreeNode(name=node.name, path=node.path, kind=node.kind, children=frozen_children))
    nodes.sort(key=_child_sort_key)
    return tuple(nodes)


def build_tree(paths: Iterable[str]) -> BuildResult:
    """Build a sorted tree and the set of folder paths from flat ``paths``.

    Paths that normalize to no segments are ignored. The result depends only
    on the set of normalized paths, never on input order.
    """
    root: dict[str, _BuildNode] = {}
    for raw_path in paths:
        parts = split_path(raw_path)
        current = root
        current_path = ""
        for index, segment in enumerate(parts):
            is_leaf = index == len(parts) - 1
            next_path = f"{current_path}/{segment}" if current_path else segment
            node = _add_node(current, segment, next_path, FILE if is_leaf else FOLDER)
            if is_leaf:
                break
            current = node.children
            current_path = next_path

    folder_paths: set[str] = set()
    nodes = _freeze(root, folder_paths)
    return BuildResult(nodes=nodes, folder_paths=frozenset(folder_paths))
