from __future__ import annotations

import unittest

from pathtree.expansion import (
    controlled_expanded_paths_to_expanded_ids,
    expanded_ids_to_controlled_expanded_paths,
    hidden_expanded_ids_to_preserve,
    ids_to_paths,
    paths_to_ids,
)
from pathtree.file_tree_model import build_identifier_maps, build_tree

DEEP_FILES = [
    "Build/assets/images/social/og.png",
    "Build/assets/images/social/twitter.png",
    "Build/assets/images/logo.png",
    "Build/assets/favicon.ico",
    "Build/config.json",
    "README.md",
]


class IdPathConversionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.maps = build_identifier_maps(build_tree(["src/lib/a.ts", "src/lib/b.ts"]))

    def test_ids_to_paths_strips_prefix_and_skips_unknown(self) -> None:
        self.assertEqual(
            ids_to_paths(["f::src/lib", "src/lib", "root", "missing", "src/lib/a.ts"], self.maps.id_to_path),
            ["src/lib", "src/lib/a.ts"],
        )

    def test_paths_to_ids_picks_one_id_per_path(self) -> None:
        self.assertEqual(paths_to_ids(["src/lib", "src"], self.maps.path_to_id, True), ["f::src/lib", "src"])
        self.assertEqual(paths_to_ids(["src/lib", "nope"], self.maps.path_to_id, False), ["src/lib"])

    def test_controlled_paths_expand_with_ancestors(self) -> None:
        self.assertEqual(
            controlled_expanded_paths_to_expanded_ids(["src/lib"], self.maps.path_to_id, True),
            ["src", "f::src/lib"],
        )

    def test_controlled_paths_from_ids_hide_orphans(self) -> None:
        self.assertEqual(
            expanded_ids_to_controlled_expanded_paths(
                ["src/lib"], self.maps.id_to_path, self.maps.path_to_id, False
            ),
            [],
        )
        # With flattening, src is interior to the src/lib chain row.
        self.assertEqual(
            expanded_ids_to_controlled_expanded_paths(
                ["f::src/lib"], self.maps.id_to_path, self.maps.path_to_id, True
            ),
            ["src/lib"],
        )
        self.assertEqual(
            expanded_ids_to_controlled_expanded_paths(
                ["src", "f::src/lib"], self.maps.id_to_path, self.maps.path_to_id, True
            ),
            ["src", "src/lib"],
        )


class HiddenExpandedIdsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.maps = build_identifier_maps(build_tree(DEEP_FILES))

    def _preserve(self, current: list[str], desired: list[str]) -> list[str]:
        return hidden_expanded_ids_to_preserve(current, desired, self.maps.id_to_path, self.maps.path_to_id, False)

    def test_descendants_of_a_collapsed_folder_are_preserved(self) -> None:
        current = ["Build/assets", "Build/assets/images", "Build/assets/images/social"]

        self.assertEqual(self._preserve(current, []), current)

    def test_folder_being_collapsed_is_not_preserved(self) -> None:
        self.assertEqual(self._preserve(["Build", "Build/assets"], ["Build"]), [])

    def test_paths_in_desired_set_are_not_preserved(self) -> None:
        current = ["Build", "Build/assets/images", "Build/assets/images/social"]

        self.assertEqual(
            self._preserve(current, ["Build"]),
            ["Build/assets/images", "Build/assets/images/social"],
        )

    def test_empty_current_state(self) -> None:
        self.assertEqual(self._preserve([], ["Build"]), [])


if __name__ == "__main__":
    unittest.main()
