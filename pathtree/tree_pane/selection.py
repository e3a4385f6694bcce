"""Single, range, and toggle multi-selection over visible tree rows.

Range selection pivots on an anchor set by the most recent plain or
toggle click; shift clicks never move the anchor.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from loguru import logger


@dataclass(frozen=True)
class ClickModifiers:
    shift: bool = False
    toggle: bool = False

    @classmethod
    def from_keys(
        cls,
        shift: bool = False,
        ctrl: bool = False,
        meta: bool = False,
        platform: str | None = None,
    ) -> ClickModifiers:
        """Map raw key flags to modifiers: cmd toggles on macOS, ctrl elsewhere."""
        platform = sys.platform if platform is None else platform
        toggle = meta if platform == "darwin" else ctrl
        return cls(shift=shift, toggle=toggle)


PLAIN_CLICK = ClickModifiers()


@dataclass(frozen=True)
class SelectionState:
    selected: frozenset[str] = field(default_factory=frozenset)
    anchor: str | None = None


class SelectionController:
    """Owns one panel's selection and resolves clicks against visible order."""

    def __init__(self) -> None:
        self._state = SelectionState()
        self._rows_key: tuple[str, ...] | None = None

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def selected(self) -> frozenset[str]:
        return self._state.selected

    @property
    def anchor(self) -> str | None:
        return self._state.anchor

    def reset(self) -> SelectionState:
        """Clear selection and anchor, as a click on empty canvas does."""
        self._state = SelectionState()
        return self._state

    def sync_rows(self, paths: Sequence[str]) -> bool:
        """Clear selection when the underlying path list changes.

        Returns ``True`` when the selection was reset.
        """
        key = tuple(paths)
        if key == self._rows_key:
            return False
        changed = self._rows_key is not None
        self._rows_key = key
        if changed:
            self.reset()
        return changed

    def resolve_click(
        self,
        path: str | None,
        order: Sequence[str],
        modifiers: ClickModifiers = PLAIN_CLICK,
    ) -> SelectionState:
        """Apply one click at ``path`` (``None`` for empty canvas)."""
        if path is None:
            return self.reset()
        if path not in order:
            logger.debug(f"[selection] ignoring click on hidden row {path!r}")
            return self._state

        current = self._state
        if modifiers.toggle:
            selected = set(current.selected)
            if path in selected:
                selected.discard(path)
            else:
                selected.add(path)
            self._state = SelectionState(selected=frozenset(selected), anchor=path)
        elif modifiers.shift and current.anchor is not None:
            if current.anchor not in order:
                logger.debug(f"[selection] ignoring range from hidden anchor {current.anchor!r}")
                return self._state
            anchor_idx = order.index(current.anchor)
            path_idx = order.index(path)
            start = min(anchor_idx, path_idx)
            end = max(anchor_idx, path_idx)
            self._state = SelectionState(selected=frozenset(order[start : end + 1]), anchor=current.anchor)
        else:
            self._state = SelectionState(selected=frozenset({path}), anchor=path)
        return self._state

    def context_targets(self, path: str, order: Sequence[str]) -> list[str]:
        """Return paths a context-menu action at ``path`` should operate on.

        A right click inside a multi-row selection targets the whole
        selection; elsewhere it selects and targets ``path`` alone.
        """
        selected = self._state.selected
        if path in selected and len(selected) > 1:
            ranked = [item for item in order if item in selected]
            ranked.extend(sorted(selected.difference(ranked)))
            return ranked
        if path not in selected:
            self._state = SelectionState(selected=frozenset({path}), anchor=path)
        return [path]
