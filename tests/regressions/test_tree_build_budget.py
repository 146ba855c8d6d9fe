"""Performance budget tests for tree building and state reconciliation.

These tests use synthetic large path lists with conservative time budgets so
regressions are caught without depending on machine-specific microbenchmarks.
"""

from __future__ import annotations

import time
import unittest

from pathtree.file_tree_model import build_identifier_maps, build_tree
from pathtree.runtime import FileTree, FileTreeOptions


def _synthetic_paths(top: int = 40, mid: int = 25, leaves: int = 20) -> list[str]:
    paths: list[str] = []
    for a in range(top):
        for b in range(mid):
            for c in range(leaves):
                paths.append(f"pkg{a}/mod{b}/src/impl/file{c}.py")
    return paths


class TreeBuildBudgetTests(unittest.TestCase):
    def test_build_and_maps_for_twenty_thousand_paths(self) -> None:
        paths = _synthetic_paths()

        started = time.perf_counter()
        tree = build_tree(paths)
        maps = build_identifier_maps(tree)
        elapsed = time.perf_counter() - started

        self.assertIn("f::pkg0/mod0/src/impl", tree)
        self.assertGreater(len(maps.path_to_id), len(paths))
        self.assertLess(elapsed, 5.0)

    def test_deep_chain_builds_without_recursion_limits(self) -> None:
        path = "/".join(f"d{idx}" for idx in range(1500)) + "/leaf.txt"

        started = time.perf_counter()
        tree = build_tree([path])
        maps = build_identifier_maps(tree)
        elapsed = time.perf_counter() - started

        self.assertEqual(len([node_id for node_id in tree if node_id.startswith("f::")]), 1)
        self.assertIn(path, maps.path_to_id)
        self.assertLess(elapsed, 10.0)

    def test_round_trip_on_large_tree(self) -> None:
        paths = _synthetic_paths(top=20, mid=20, leaves=10)
        ft = FileTree(FileTreeOptions(files=paths, flatten_empty_directories=True))
        expanded = [f"pkg{a}/mod{b}/src/impl" for a in range(20) for b in range(0, 20, 2)]

        started = time.perf_counter()
        ft.set_expanded_items(expanded)
        for a in range(0, 20, 3):
            ft.collapse_item(f"pkg{a}")
        for _ in range(5):
            ft.set_expanded_items(ft.get_expanded_items())
        elapsed = time.perf_counter() - started

        self.assertNotIn("pkg0/mod0/src/impl", ft.get_expanded_items())
        self.assertIn("pkg1/mod0/src/impl", ft.get_expanded_items())
        self.assertLess(elapsed, 5.0)


if __name__ == "__main__":
    unittest.main()
