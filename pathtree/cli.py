"""Command-line front door for pathtree.

Reads a flat path list (or ``git status --porcelain -z`` output), builds
the tree through a ``TreePanel``, and prints the visible rows.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from .runtime.config import load_panel_config
from .search import highlight_segments
from .tree_model import PathEntry, TreeRow, entries_from_porcelain, status_symbol
from .tree_pane import TreePanel

_STATUS_COLORS = {
    "A": "\033[38;5;42m",
    "M": "\033[38;5;214m",
    "D": "\033[38;5;203m",
    "R": "\033[38;5;75m",
    "T": "\033[38;5;141m",
}
_MATCH_ON = "\033[7;1m"
_MATCH_OFF = "\033[27;22m"
_RESET = "\033[0m"


def read_entries(text: str, porcelain: bool) -> list[PathEntry]:
    """Parse input text into path entries."""
    if porcelain:
        return entries_from_porcelain(text)
    return [PathEntry(path=line.strip()) for line in text.splitlines() if line.strip()]


def format_row(row: TreeRow, query: str, color: bool, show_status: bool) -> str:
    """Render one visible row as plain or ANSI-styled text."""
    indent = "  " * row.depth
    if color:
        name = "".join(
            f"{_MATCH_ON}{segment.text}{_MATCH_OFF}" if segment.matched else segment.text
            for segment in highlight_segments(row.name, query)
        )
    else:
        name = row.name
    if row.is_folder:
        name += "/"

    badge = ""
    if show_status and row.status is not None:
        symbol = status_symbol(row.status)
        badge = f" [{symbol}]"
        if color:
            badge = f" {_STATUS_COLORS[row.status.value]}[{symbol}]{_RESET}"
    return f"{indent}{name}{badge}"


def render_panel(panel: TreePanel, color: bool, show_status: bool) -> str:
    return "".join(format_row(row, panel.query, color, show_status) + "\n" for row in panel.rows())


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the tree for the given path list."""
    parser = argparse.ArgumentParser(description="Print a flat path list as a sorted, filterable tree.")
    parser.add_argument("path", nargs="?", default=None, help="File with one path per line. Defaults to stdin.")
    parser.add_argument("--porcelain", action="store_true", help="Input is `git status --porcelain=v1 -z` output.")
    parser.add_argument("--query", default="", help="Only show paths containing QUERY (case-insensitive).")
    parser.add_argument("--expand-all", action="store_true", help="Expand every folder.")
    parser.add_argument("--no-status", action="store_true", help="Hide status badges.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr.")
    args = parser.parse_args(argv)

    if args.verbose:
        logger.remove()
        logger.enable("pathtree")
        logger.add(sys.stderr, level="DEBUG")

    if args.path is not None:
        source = Path(args.path)
        if not source.is_file():
            raise SystemExit(f"Path not found: {source}")
        text = source.read_text(encoding="utf-8", errors="replace")
    else:
        text = sys.stdin.read()

    config = load_panel_config()
    panel = TreePanel(config)
    panel.set_entries(read_entries(text, args.porcelain))
    panel.set_query(args.query)
    if args.expand_all:
        panel.toggle_all(True)

    color = not args.no_color and sys.stdout.isatty()
    show_status = config.show_status_badges and not args.no_status
    sys.stdout.write(render_panel(panel, color, show_status))


if __name__ == "__main__":
    main()
