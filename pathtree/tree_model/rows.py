"""Depth-first traversal and visible-row projection of built trees."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping

from .types import StatusCode, TreeNode, TreeRow


def iter_nodes(nodes: Iterable[TreeNode]) -> Iterator[TreeNode]:
    """Yield every node in depth-first pre-order."""
    for node in nodes:
        yield node
        if node.is_folder:
            yield from iter_nodes(node.children)


def flatten_paths(nodes: Iterable[TreeNode]) -> list[str]:
    """Return full paths of every file node in depth-first order."""
    return [node.path for node in iter_nodes(nodes) if not node.is_folder]


def count_files(nodes: Iterable[TreeNode]) -> int:
    return sum(1 for node in iter_nodes(nodes) if not node.is_folder)


def visible_rows(
    nodes: Iterable[TreeNode],
    is_expanded: Callable[[str], bool],
    leaf_status: Mapping[str, StatusCode | None] | None = None,
    folder_status: Mapping[str, StatusCode] | None = None,
) -> list[TreeRow]:
    """Project nodes to rendered rows, skipping children of collapsed folders."""
    leaf_status = leaf_status or {}
    folder_status = folder_status or {}
    rows: list[TreeRow] = []

    def walk(children: Iterable[TreeNode], depth: int) -> None:
        for node in children:
            if node.is_folder:
                expanded = is_expanded(node.path)
                rows.append(
                    TreeRow(
                        path=node.path,
                        name=node.name,
                        kind=node.kind,
                        depth=depth,
                        status=folder_status.get(node.path),
                        expanded=expanded,
                    )
                )
                if expanded:
                    walk(node.children, depth + 1)
                continue
            rows.append(
                TreeRow(
                    path=node.path,
                    name=node.name,
                    kind=node.kind,
                    depth=depth,
                    status=StatusCode.coerce(leaf_status.get(node.path)),
                )
            )

    walk(nodes, 0)
    return rows


def row_order(rows: Iterable[TreeRow]) -> list[str]:
    """Return the visible path order used as the range-selection index space."""
    return [row.path for row in rows]
