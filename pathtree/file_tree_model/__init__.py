"""Domain model for path-derived file trees.

This package contains non-UI tree primitives:
- node datatypes with direct and flattened child lists
- flat path list to node-map conversion
- single-child chain detection used for flattening
- path <-> id lookup tables for state reconciliation
"""

from __future__ import annotations

from .types import FileTreeData, FileTreeNode, FileTreeNodeChildren
from .build import ReservedPathError, build_tree, file_list_to_tree
from .flatten import FlatteningResolver
from .id_maps import IdentifierMaps, build_identifier_maps

__all__ = [
    "FileTreeData",
    "FileTreeNode",
    "FileTreeNodeChildren",
    "ReservedPathError",
    "build_tree",
    "file_list_to_tree",
    "FlatteningResolver",
    "IdentifierMaps",
    "build_identifier_maps",
]
