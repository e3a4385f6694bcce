"""Tree construction tests for flat path lists.

Covers folder promotion, sibling ordering, empty-segment leniency, and
order-independent rebuilds.
"""

from __future__ import annotations

import random
import typing
import unittest

from pathtree.tree_model import FILE, FOLDER, NodeKind, TreeNode, build_tree, flatten_paths, iter_nodes


def _assert_sorted(testcase: unittest.TestCase, nodes: tuple[TreeNode, ...]) -> None:
    kinds = [node.kind for node in nodes]
    testcase.assertEqual(kinds, sorted(kinds, key=lambda kind: kind != FOLDER))
    folders = [node.name for node in nodes if node.kind == FOLDER]
    files = [node.name for node in nodes if node.kind == FILE]
    testcase.assertEqual(folders, sorted(folders))
    testcase.assertEqual(files, sorted(files))
    for node in nodes:
        _assert_sorted(testcase, node.children)


class BuildTreeTests(unittest.TestCase):
    def test_folder_promotion_when_path_is_both_file_and_prefix(self) -> None:
        for paths in (["a", "a/b"], ["a/b", "a"]):
            result = build_tree(paths)
            self.assertEqual(len(result.nodes), 1)
            node = result.nodes[0]
            self.assertEqual((node.name, node.path, node.kind), ("a", "a", FOLDER))
            self.assertEqual([(child.path, child.kind) for child in node.children], [("a/b", FILE)])
            self.assertEqual(result.folder_paths, frozenset({"a"}))

    def test_folders_sort_before_files_then_case_sensitive_names(self) -> None:
        result = build_tree(["b.txt", "Z.txt", "src/app.py", "lib/x.py", "a.txt"])
        self.assertEqual([node.name for node in result.nodes], ["lib", "src", "Z.txt", "a.txt", "b.txt"])

    def test_sibling_order_is_recomputed_for_late_insertions(self) -> None:
        result = build_tree(["src/z.py", "src/a.py", "src/m/inner.py"])
        src = result.nodes[0]
        self.assertEqual([child.name for child in src.children], ["m", "a.py", "z.py"])

    def test_empty_segments_collapse(self) -> None:
        lenient = build_tree(["a//b", "/c/", ""])
        strict = build_tree(["a/b", "c"])
        self.assertEqual(lenient, strict)

    def test_rebuild_is_independent_of_input_order(self) -> None:
        paths = ["src/app.ts", "src/lib/util.ts", "README.md", "docs/a.md", "docs/b/c.md", "src/lib"]
        shuffled = list(paths)
        random.Random(7).shuffle(shuffled)
        self.assertEqual(build_tree(paths), build_tree(shuffled))

    def test_flatten_round_trips_deduplicated_paths(self) -> None:
        paths = ["src/app.ts", "README.md", "src/app.ts", "docs/guide/intro.md"]
        result = build_tree(paths)
        self.assertEqual(sorted(flatten_paths(result.nodes)), sorted(set(paths)))

    def test_sort_invariant_holds_at_every_level(self) -> None:
        paths = ["b/y", "b/a/x", "a", "c/B", "c/a", "c/A/q"]
        _assert_sorted(self, build_tree(paths).nodes)

    def test_one_node_per_distinct_path(self) -> None:
        result = build_tree(["x/y/z", "x/y", "x/y/z", "x/w"])
        all_paths = [node.path for node in iter_nodes(result.nodes)]
        self.assertEqual(len(all_paths), len(set(all_paths)))
        self.assertEqual(result.folder_paths, frozenset({"x", "x/y"}))

    def test_node_kind_is_a_closed_file_or_folder_tag(self) -> None:
        self.assertEqual(typing.get_args(NodeKind), (FILE, FOLDER))
        node = build_tree(["a/b"]).nodes[0]
        self.assertTrue(node.is_folder)
        self.assertFalse(node.children[0].is_folder)

    def test_empty_input_builds_empty_tree(self) -> None:
        result = build_tree([])
        self.assertEqual(result.nodes, ())
        self.assertEqual(result.folder_paths, frozenset())


if __name__ == "__main__":
    unittest.main()
