"""Visible-row projection tests for the indexed tree."""

from __future__ import annotations

import unittest

from pathtree.file_tree_model import build_tree
from pathtree.tree_pane import IndexedTree, SyncDataLoader, TreeRow


def _rows(tree: IndexedTree) -> list[tuple[str, int]]:
    return [(row.name, row.depth) for row in tree.get_items()]


class SyncDataLoaderTests(unittest.TestCase):
    def test_children_follow_flattening_mode(self) -> None:
        data = build_tree(["a/b/x.ts", "a/b/y.ts"])

        self.assertEqual(SyncDataLoader(data, flatten=True).get_children("root"), ("f::a/b",))
        self.assertEqual(SyncDataLoader(data, flatten=False).get_children("root"), ("a",))
        self.assertEqual(SyncDataLoader(data).get_children("a/b/x.ts"), ())
        self.assertEqual(SyncDataLoader(data).get_children("missing"), ())
        self.assertIsNone(SyncDataLoader(data).get_item("missing"))


class IndexedTreeRowsTests(unittest.TestCase):
    FILES = ["README.md", "src/index.ts", "src/components/Button.tsx", "src/components/Card.tsx"]

    def test_collapsed_tree_shows_top_level_rows_only(self) -> None:
        tree = IndexedTree(SyncDataLoader(build_tree(self.FILES)))

        self.assertEqual(_rows(tree), [("src", 0), ("README.md", 0)])

    def test_expanded_folders_show_children_depth_first(self) -> None:
        tree = IndexedTree(SyncDataLoader(build_tree(self.FILES)))
        tree.apply_expanded(["src", "src/components"])

        self.assertEqual(
            _rows(tree),
            [
                ("src", 0),
                ("components", 1),
                ("Button.tsx", 2),
                ("Card.tsx", 2),
                ("index.ts", 1),
                ("README.md", 0),
            ],
        )

    def test_expanded_child_under_collapsed_parent_stays_hidden(self) -> None:
        tree = IndexedTree(SyncDataLoader(build_tree(self.FILES)))
        tree.apply_expanded(["src/components"])

        self.assertEqual(_rows(tree), [("src", 0), ("README.md", 0)])

    def test_flattened_rows_use_chain_names(self) -> None:
        data = build_tree(["src/components/deep/Button.tsx", "src/components/deep/Card.tsx", "src/lib/utils.ts"])
        tree = IndexedTree(SyncDataLoader(data, flatten=True))
        tree.apply_expanded(["src", "f::src/components/deep"])

        self.assertEqual(
            _rows(tree),
            [
                ("src", 0),
                ("components/deep", 1),
                ("Button.tsx", 2),
                ("Card.tsx", 2),
                ("lib", 1),
            ],
        )

    def test_directories_sort_first_then_case_folded_names(self) -> None:
        tree = IndexedTree(SyncDataLoader(build_tree(["b.txt", "A.txt", "C/x.txt"])))

        self.assertEqual([row.name for row in tree.get_items()], ["C", "A.txt", "b.txt"])

    def test_row_flags(self) -> None:
        tree = IndexedTree(SyncDataLoader(build_tree(self.FILES)))
        tree.apply_expanded(["src"])
        tree.apply_selected(["src/index.ts"])

        rows = {row.id: row for row in tree.get_items()}
        self.assertEqual(
            rows["src"],
            TreeRow(id="src", name="src", depth=0, is_folder=True, is_expanded=True),
        )
        self.assertTrue(rows["src/index.ts"].is_selected)
        self.assertFalse(rows["src/components"].is_expanded)

    def test_id_sets_keep_insertion_order(self) -> None:
        tree = IndexedTree(SyncDataLoader(build_tree(self.FILES)))
        tree.apply_expanded(["src/components", "src", "src/components"])

        self.assertEqual(tree.expanded_ids, ["src/components", "src"])
        self.assertTrue(tree.is_expanded("src"))
        self.assertTrue(tree.is_folder("src"))
        self.assertFalse(tree.is_folder("README.md"))


if __name__ == "__main__":
    unittest.main()
