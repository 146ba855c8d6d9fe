"""Public package surface for pathtree.

Exports the tree builder, identifier maps, expansion helpers and the
``FileTree`` reconciler. ``main`` runs the command-line tool.
"""

from __future__ import annotations

from .constants import FLATTENED_PREFIX, ROOT_ID
from .expansion import expand_implicit_parent_directories, expand_with_ancestors, filter_orphaned
from .file_tree_model import (
    FileTreeNode,
    FileTreeNodeChildren,
    IdentifierMaps,
    ReservedPathError,
    build_identifier_maps,
    build_tree,
    file_list_to_tree,
)
from .runtime import FileTree, FileTreeOptions, FileTreeSelectionItem, FileTreeStateConfig


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "FLATTENED_PREFIX",
    "ROOT_ID",
    "FileTreeNode",
    "FileTreeNodeChildren",
    "IdentifierMaps",
    "ReservedPathError",
    "build_identifier_maps",
    "build_tree",
    "file_list_to_tree",
    "expand_implicit_parent_directories",
    "expand_with_ancestors",
    "filter_orphaned",
    "FileTree",
    "FileTreeOptions",
    "FileTreeSelectionItem",
    "FileTreeStateConfig",
    "main",
]
