"""Indexed tree instance holding the internal expanded/selected id sets."""

from __future__ import annotations

from collections.abc import Iterable

from ..constants import ROOT_ID
from .loader import SyncDataLoader
from .types import TreeRow


class IndexedTree:
    """Id-level tree state consumed by row renderers.

    Ids are stored in insertion order. Callers translate paths before
    touching this object; it never sees external path lists.
    """

    def __init__(self, loader: SyncDataLoader, root_id: str = ROOT_ID) -> None:
        self.loader = loader
        self.root_id = root_id
        self._expanded_ids: dict[str, None] = {}
        self._selected_ids: dict[str, None] = {}

    @property
    def expanded_ids(self) -> list[str]:
        return list(self._expanded_ids)

    @property
    def selected_ids(self) -> list[str]:
        return list(self._selected_ids)

    def apply_expanded(self, ids: Iterable[str]) -> None:
        self._expanded_ids = dict.fromkeys(ids)

    def apply_selected(self, ids: Iterable[str]) -> None:
        self._selected_ids = dict.fromkeys(ids)

    def is_expanded(self, item_id: str) -> bool:
        return item_id in self._expanded_ids

    def is_folder(self, item_id: str) -> bool:
        node = self.loader.get_item(item_id)
        return node is not None and node.is_folder

    def _sorted_children(self, item_id: str) -> list[str]:
        def child_sort_key(child_id: str) -> tuple[bool, str]:
            """Sort directories before files and then by case-folded name."""
            node = self.loader.get_item(child_id)
            if node is None:
                return (True, child_id.casefold())
            return (not node.is_folder, node.name.casefold())

        return sorted(self.loader.get_children(item_id), key=child_sort_key)

    def get_items(self) -> list[TreeRow]:
        """Return visible rows below the root, honoring expansion state."""
        rows: list[TreeRow] = []
        # Explicit stack of (id, depth), children pushed in reverse order.
        stack: list[tuple[str, int]] = [
            (child_id, 0) for child_id in reversed(self._sorted_children(self.root_id))
        ]
        while stack:
            item_id, depth = stack.pop()
            node = self.loader.get_item(item_id)
            if node is None:
                continue
            expanded = node.is_folder and item_id in self._expanded_ids
            rows.append(
                TreeRow(
                    id=item_id,
                    name=node.name,
                    depth=depth,
                    is_folder=node.is_folder,
                    is_expanded=expanded,
                    is_selected=item_id in self._selected_ids,
                )
            )
            if expanded:
                stack.extend((child_id, depth + 1) for child_id in reversed(self._sorted_children(item_id)))
        return rows
