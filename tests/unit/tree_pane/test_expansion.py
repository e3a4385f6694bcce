"""Expansion-state reconciliation tests for browsing and searching modes."""

from __future__ import annotations

import unittest

from pathtree.tree_pane import BROWSING, SEARCHING, TreeStateController


class TreeStateControllerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.controller = TreeStateController()
        self.controller.sync({"src", "src/app", "docs"})

    def test_starts_collapsed(self) -> None:
        self.assertEqual(self.controller.expanded, frozenset())
        self.assertFalse(self.controller.is_expanded("src"))

    def test_toggle_flips_folders_and_ignores_non_folders(self) -> None:
        self.assertTrue(self.controller.toggle("src"))
        self.assertTrue(self.controller.is_expanded("src"))
        self.assertTrue(self.controller.toggle("src"))
        self.assertFalse(self.controller.is_expanded("src"))
        self.assertFalse(self.controller.toggle("src/app/main.py"))
        self.assertEqual(self.controller.expanded, frozenset())

    def test_toggle_all(self) -> None:
        self.controller.toggle_all({"src", "src/app", "docs", "ghost"}, True)
        self.assertEqual(self.controller.expanded, frozenset({"src", "src/app", "docs"}))
        self.assertTrue(self.controller.all_expanded(self.controller.folder_paths))
        self.controller.toggle_all({"src/app"}, False)
        self.assertEqual(self.controller.expanded, frozenset({"src", "docs"}))
        self.assertFalse(self.controller.all_expanded(self.controller.folder_paths))

    def test_all_expanded_requires_folders(self) -> None:
        self.assertFalse(self.controller.all_expanded([]))

    def test_rebuild_prunes_stale_entries(self) -> None:
        self.controller.toggle("src")
        self.controller.toggle("docs")
        self.controller.sync({"src", "lib"})
        self.assertEqual(self.controller.expanded, frozenset({"src"}))

    def test_search_forces_expansion_without_touching_manual_set(self) -> None:
        self.controller.toggle("docs")
        self.assertTrue(self.controller.is_expanded("src/app", "foo"))
        self.assertTrue(self.controller.is_expanded("src", "foo"))
        self.assertFalse(self.controller.is_expanded("src/app", ""))
        self.assertTrue(self.controller.is_expanded("docs", ""))
        self.assertEqual(self.controller.expanded, frozenset({"docs"}))

    def test_observed_query_switches_modes(self) -> None:
        self.controller.toggle("src")
        self.assertEqual(self.controller.observe_query("app"), SEARCHING)
        self.assertTrue(self.controller.is_expanded("src/app"))
        self.assertFalse(self.controller.toggle("docs"))
        self.assertEqual(self.controller.observe_query("  "), BROWSING)
        self.assertTrue(self.controller.is_expanded("src"))
        self.assertFalse(self.controller.is_expanded("src/app"))
        self.assertFalse(self.controller.is_expanded("docs"))

    def test_auto_expand_top_level_until_manual_toggle(self) -> None:
        controller = TreeStateController(auto_expand_top_level=True)
        controller.sync({"src", "src/app", "docs"}, top_level_folders=["src", "docs"])
        self.assertEqual(controller.expanded, frozenset({"src", "docs"}))

        controller.toggle_all(controller.folder_paths, False)
        controller.sync({"src", "src/app", "docs"}, top_level_folders=["src", "docs"])
        self.assertEqual(controller.expanded, frozenset())


if __name__ == "__main__":
    unittest.main()
