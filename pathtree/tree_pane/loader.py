"""Eager data loader over a fully built node map."""

from __future__ import annotations

from collections.abc import Mapping

from ..file_tree_model.types import FileTreeNode


class SyncDataLoader:
    """Serve nodes and mode-dependent child lists from an in-memory map."""

    def __init__(self, data: Mapping[str, FileTreeNode], flatten: bool = False) -> None:
        self.data = data
        self.flatten = flatten

    def get_item(self, item_id: str) -> FileTreeNode | None:
        return self.data.get(item_id)

    def get_children(self, item_id: str) -> tuple[str, ...]:
        """Return the collapsed list when flattening and present, else direct."""
        node = self.data.get(item_id)
        if node is None or node.children is None:
            return ()
        return node.children.for_mode(self.flatten)
