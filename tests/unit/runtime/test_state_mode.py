from __future__ import annotations

import unittest

from pathtree.runtime import Controlled, FileTreeStateConfig, Uncontrolled, resolve_state_mode


class ResolveStateModeTests(unittest.TestCase):
    def test_defaults_only_resolve_to_uncontrolled(self) -> None:
        mode = resolve_state_mode(FileTreeStateConfig(default_expanded_items=["src"]))

        self.assertEqual(mode, Uncontrolled(default_expanded_items=("src",)))
        self.assertEqual(mode.initial_expanded_items, ("src",))
        self.assertEqual(mode.initial_selected_items, ())

    def test_any_controlled_list_resolves_to_controlled(self) -> None:
        mode = resolve_state_mode(FileTreeStateConfig(selected_items=["a.ts"], default_expanded_items=["src"]))

        self.assertIsInstance(mode, Controlled)
        self.assertEqual(mode.initial_selected_items, ("a.ts",))
        self.assertEqual(mode.initial_expanded_items, ("src",))

    def test_controlled_list_wins_over_default(self) -> None:
        mode = resolve_state_mode(
            FileTreeStateConfig(expanded_items=[], default_expanded_items=["src"])
        )

        self.assertEqual(mode, Controlled())

    def test_empty_config_is_uncontrolled(self) -> None:
        self.assertEqual(resolve_state_mode(FileTreeStateConfig()), Uncontrolled())

    def test_callbacks_are_copied_from_config(self) -> None:
        def on_change(paths: list[str]) -> None:
            return None

        callbacks = FileTreeStateConfig(on_expanded_items_change=on_change).callbacks()

        self.assertIs(callbacks.on_expanded_items_change, on_change)
        self.assertIsNone(callbacks.on_selection)


if __name__ == "__main__":
    unittest.main()
