"""Row datatypes produced for tree-pane consumers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TreeRow:
    """One visible row of the tree, in depth-first display order."""

    id: str
    name: str
    depth: int
    is_folder: bool
    is_expanded: bool = False
    is_selected: bool = False
