"""Status roll-up for folders plus git porcelain parsing into entries.

Folder status is the highest-priority status of any file below it:
``D > A > M > R > T``. Folders without status-bearing files are absent
from the returned map.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from loguru import logger

from .types import PathEntry, StatusCode, TreeNode

STATUS_PRIORITY: dict[StatusCode, int] = {
    StatusCode.DELETED: 4,
    StatusCode.ADDED: 3,
    StatusCode.MODIFIED: 2,
    StatusCode.RENAMED: 1,
    StatusCode.TYPE_CHANGED: 0,
}

_STATUS_SYMBOLS: dict[StatusCode, str] = {
    StatusCode.ADDED: "+",
    StatusCode.MODIFIED: "M",
    StatusCode.DELETED: "-",
    StatusCode.RENAMED: "R",
    StatusCode.TYPE_CHANGED: "T",
}

# Porcelain XY letters that have no direct StatusCode counterpart.
_PORCELAIN_ALIASES: dict[str, StatusCode] = {
    "?": StatusCode.ADDED,
    "C": StatusCode.ADDED,
    "U": StatusCode.MODIFIED,
}


def higher_status(current: StatusCode | None, candidate: StatusCode | None) -> StatusCode | None:
    """Return whichever of two statuses ranks higher."""
    if candidate is None:
        return current
    if current is None or STATUS_PRIORITY[candidate] > STATUS_PRIORITY[current]:
        return candidate
    return current


def status_symbol(status: StatusCode | str | None) -> str:
    """Return the one-character badge glyph for ``status``."""
    code = StatusCode.coerce(status)
    if code is None:
        return "?"
    return _STATUS_SYMBOLS[code]


def aggregate_folder_status(
    nodes: Iterable[TreeNode],
    leaf_status: Mapping[str, StatusCode | str | None],
) -> dict[str, StatusCode]:
    """Roll leaf statuses up into every ancestor folder.

    One post-order pass; each node is visited exactly once.
    """
    folder_status: dict[str, StatusCode] = {}

    def visit(node: TreeNode) -> StatusCode | None:
        if not node.is_folder:
            return StatusCode.coerce(leaf_status.get(node.path))
        best: StatusCode | None = None
        for child in node.children:
            best = higher_status(best, visit(child))
        if best is not None:
            folder_status[node.path] = best
        return best

    for node in nodes:
        visit(node)
    return folder_status


def status_map(entries: Iterable[PathEntry]) -> dict[str, StatusCode]:
    """Map each status-bearing entry path to its status."""
    return {entry.path: entry.status for entry in entries if entry.status is not None}


def entries_from_paths(
    paths: Iterable[str],
    leaf_status: Mapping[str, StatusCode | str | None] | None = None,
) -> list[PathEntry]:
    """Wrap bare ``paths`` as entries, tagging any status found in ``leaf_status``."""
    statuses = leaf_status or {}
    return [PathEntry(path=path, status=StatusCode.coerce(statuses.get(path))) for path in paths]


def _porcelain_status(xy: str) -> StatusCode | None:
    """Pick the index column, falling back to the worktree column."""
    for letter in (xy[0], xy[1]):
        if letter in {" ", "."}:
            continue
        alias = _PORCELAIN_ALIASES.get(letter)
        if alias is not None:
            return alias
        code = StatusCode.coerce(letter)
        if code is not None:
            return code
    return None


def entries_from_porcelain(output: str) -> list[PathEntry]:
    """Parse ``git status --porcelain=v1 -z`` output into entries.

    Renamed and copied records consume the following source-path token.
    Ignored (``!!``) and malformed records are skipped.
    """
    entries: list[PathEntry] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if not token:
            continue
        if len(token) < 4 or token[2] != " ":
            logger.debug(f"[porcelain] skipping malformed record {token!r}")
            continue

        xy = token[:2]
        path_text = token[3:]
        if "R" in xy or "C" in xy:
            index += 1
        if xy == "!!":
            continue

        entries.append(PathEntry(path=path_text, status=_porcelain_status(xy)))
    return entries
