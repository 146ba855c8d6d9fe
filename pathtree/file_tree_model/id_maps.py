"""Bidirectional path <-> id maps derived from a built tree."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..constants import ROOT_ID
from .types import FileTreeNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdentifierMaps:
    """Read-only lookup tables shared by every state-reconciliation call.

    Flattened nodes are registered under their prefixed path, so
    ``path_to_id["f::a/b"]`` resolves the chain node while ``path_to_id["a/b"]``
    resolves the real directory.
    """

    path_to_id: Mapping[str, str]
    id_to_path: Mapping[str, str]


def build_identifier_maps(tree: Mapping[str, FileTreeNode], root_id: str = ROOT_ID) -> IdentifierMaps:
    """Walk ``tree`` from ``root_id`` and register every reachable node once."""
    path_to_id: dict[str, str] = {}
    id_to_path: dict[str, str] = {}
    if root_id not in tree:
        return IdentifierMaps(MappingProxyType(path_to_id), MappingProxyType(id_to_path))

    seen: set[str] = {root_id}
    stack: list[str] = [root_id]
    while stack:
        node_id = stack.pop()
        if node_id != root_id:
            path_to_id[node_id] = node_id
            id_to_path[node_id] = node_id
        node = tree.get(node_id)
        if node is None or node.children is None:
            continue
        for child_id in (*node.children.direct, *(node.children.collapsed or ())):
            if child_id in seen or child_id not in tree:
                continue
            seen.add(child_id)
            stack.append(child_id)

    logger.debug("identifier maps built with %d entries", len(path_to_id))
    return IdentifierMaps(MappingProxyType(path_to_id), MappingProxyType(id_to_path))
