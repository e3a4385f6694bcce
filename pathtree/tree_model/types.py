"""Path-tree datatypes shared by builders, filters, and controllers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

NodeKind = Literal["file", "folder"]

FILE: NodeKind = "file"
FOLDER: NodeKind = "folder"


class StatusCode(str, Enum):
    """Single-letter change classification attached to a leaf path."""

    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"
    RENAMED = "R"
    TYPE_CHANGED = "T"

    @classmethod
    def coerce(cls, value: object) -> StatusCode | None:
        """Return matching status for ``value`` or ``None`` when unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class PathEntry:
    """One ``/``-joined relative path, optionally tagged with a status."""

    path: str
    status: StatusCode | None = None


@dataclass(frozen=True)
class TreeNode:
    """One file or folder node; folders carry sorted children."""

    name: str
    path: str
    kind: NodeKind
    children: tuple[TreeNode, ...] = ()

    @property
    def is_folder(self) -> bool:
        return self.kind == FOLDER


@dataclass(frozen=True)
class BuildResult:
    """Top-level nodes plus every folder path found while building."""

    nodes: tuple[TreeNode, ...] = ()
    folder_paths: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class TreeRow:
    """One visible row in depth-first pre-order."""

    path: str
    name: str
    kind: NodeKind
    depth: int
    status: StatusCode | None = None
    expanded: bool = False

    @property
    def is_folder(self) -> bool:
        return self.kind == FOLDER
