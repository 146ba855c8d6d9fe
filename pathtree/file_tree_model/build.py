"""Flat path list to node-map conversion.

Directories are inferred from the strict prefixes of every input path. Each
directory node carries its direct children and, where single-child chains are
present below it, a ``collapsed`` child list that points at synthetic
flattened nodes instead.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..constants import FLATTENED_PREFIX, ROOT_ID
from .flatten import FlatteningResolver, last_segment
from .types import FileTreeData, FileTreeNode, FileTreeNodeChildren

logger = logging.getLogger(__name__)


class ReservedPathError(ValueError):
    """Raised when an input path would alias a reserved identifier."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"reserved path {path!r}: {reason}")
        self.path = path
        self.reason = reason


def _check_reserved(path: str, root_id: str) -> None:
    if path.startswith(FLATTENED_PREFIX):
        raise ReservedPathError(path, f"paths may not start with {FLATTENED_PREFIX!r}")
    if path.split("/", 1)[0] == root_id:
        raise ReservedPathError(path, f"top-level segment collides with root id {root_id!r}")


def build_tree(
    paths: Iterable[str],
    *,
    root_name: str | None = None,
    root_id: str = ROOT_ID,
) -> FileTreeData:
    """Build the id -> node map for ``paths``.

    Regular ids are the paths themselves; flattened chain nodes use
    ``FLATTENED_PREFIX + endpoint``. Duplicate paths are ignored. Raises
    ``ReservedPathError`` before building anything when a path would collide
    with the root id or the flattened prefix.
    """
    path_list = list(paths)
    for path in path_list:
        _check_reserved(path, root_id)

    # Ordered sets (dict keys) keep output deterministic for a given input.
    folder_children: dict[str, dict[str, None]] = {root_id: {}}
    file_names: dict[str, str] = {}

    for file_path in path_list:
        parts = file_path.split("/")
        current: str | None = None
        for idx, part in enumerate(parts):
            parent = current if current is not None else root_id
            current = part if current is None else f"{current}/{part}"
            folder_children.setdefault(parent, {})[current] = None
            if idx == len(parts) - 1:
                file_names.setdefault(current, part)
            else:
                folder_children.setdefault(current, {})

    resolver = FlatteningResolver(folder_children)
    interior: set[str] = set()
    flattened_nodes: dict[str, FileTreeNode] = {}

    for children in folder_children.values():
        for child in children:
            if not resolver.is_folder(child):
                continue
            endpoint = resolver.flattened_endpoint(child)
            if endpoint is None:
                continue
            flattened_id = f"{FLATTENED_PREFIX}{endpoint}"
            # Parents are visited before children, so the chain top registers first.
            if flattened_id in flattened_nodes:
                continue
            chain = resolver.chain_folders(child, endpoint)
            interior.update(chain[:-1])

            endpoint_direct = list(folder_children.get(endpoint, {}))
            endpoint_collapsed = resolver.collapsed_children(endpoint_direct)
            flattened_nodes[flattened_id] = FileTreeNode(
                name=resolver.flattened_name(child, endpoint),
                children=FileTreeNodeChildren(
                    direct=tuple(endpoint_direct),
                    collapsed=tuple(endpoint_collapsed) if endpoint_collapsed is not None else None,
                ),
                collapses=tuple(chain),
            )

    tree: FileTreeData = {}
    for folder, children in folder_children.items():
        direct = list(children)
        collapsed = None if folder in interior else resolver.collapsed_children(direct)
        if folder == root_id:
            name = root_name if root_name is not None else root_id
        else:
            name = last_segment(folder)
        tree[folder] = FileTreeNode(
            name=name,
            children=FileTreeNodeChildren(
                direct=tuple(direct),
                collapsed=tuple(collapsed) if collapsed is not None else None,
            ),
        )

    for file_path, name in file_names.items():
        # A path listed both as a file and as a prefix of another path is a directory.
        tree.setdefault(file_path, FileTreeNode(name=name))

    tree.update(flattened_nodes)
    logger.debug(
        "built tree: %d paths, %d folders, %d flattened chains",
        len(path_list),
        len(folder_children) - 1,
        len(flattened_nodes),
    )
    return tree


file_list_to_tree = build_tree
