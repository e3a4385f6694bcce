"""Stateful per-panel controllers: expansion, selection, and the panel façade."""

from __future__ import annotations

from .expansion import BROWSING, SEARCHING, TreeStateController
from .pane import TreePanel, TreeSnapshot
from .selection import PLAIN_CLICK, ClickModifiers, SelectionController, SelectionState

__all__ = [
    "BROWSING",
    "SEARCHING",
    "TreeStateController",
    "TreePanel",
    "TreeSnapshot",
    "PLAIN_CLICK",
    "ClickModifiers",
    "SelectionController",
    "SelectionState",
]
