"""Conversions between internal expanded ids and controlled path lists."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping

from ..constants import ROOT_ID
from .ancestors import expand_with_ancestors, resolve_path_id
from .orphans import filter_orphaned, is_orphaned_path_for_expanded_set
from .paths import expand_implicit_parent_directories, strip_flattened_prefix

logger = logging.getLogger(__name__)


def ids_to_paths(ids: Iterable[str], id_to_path: Mapping[str, str]) -> list[str]:
    """Map ids to unprefixed paths, skipping unknown ids, the root and duplicates."""
    seen: dict[str, None] = {}
    for node_id in ids:
        raw = id_to_path.get(node_id)
        if raw is None:
            continue
        path = strip_flattened_prefix(raw)
        if not path or path == ROOT_ID:
            continue
        seen[path] = None
    return list(seen)


def paths_to_ids(paths: Iterable[str], path_to_id: Mapping[str, str], flatten: bool = False) -> list[str]:
    """Map each path to exactly one id without ancestor expansion."""
    out: dict[str, None] = {}
    for path in paths:
        node_id = resolve_path_id(path, path_to_id, flatten)
        if node_id is not None:
            out[node_id] = None
    return list(out)


def controlled_expanded_paths_to_expanded_ids(
    paths: Iterable[str],
    path_to_id: Mapping[str, str],
    flatten: bool = False,
    cache: MutableMapping[str, tuple[str, ...]] | None = None,
) -> list[str]:
    return expand_with_ancestors(paths, path_to_id, flatten, cache)


def expanded_ids_to_controlled_expanded_paths(
    ids: Iterable[str],
    id_to_path: Mapping[str, str],
    path_to_id: Mapping[str, str],
    flatten: bool = False,
    child_count: Mapping[str, int] | None = None,
) -> list[str]:
    """Return the externally visible expanded paths for internal ``ids``."""
    return filter_orphaned(ids_to_paths(ids, id_to_path), path_to_id, flatten, child_count)


def hidden_expanded_ids_to_preserve(
    current_ids: Iterable[str],
    desired_paths: Iterable[str],
    id_to_path: Mapping[str, str],
    path_to_id: Mapping[str, str],
    flatten: bool = False,
    child_count: Mapping[str, int] | None = None,
) -> list[str]:
    """Return ids of currently expanded paths that the desired set would hide.

    A path is preserved when it is absent from the desired set and some visible
    ancestor is not expanded there either: it is under a collapsed branch, not
    being collapsed itself, so reopening the branch must restore it.
    """
    desired = set(expand_implicit_parent_directories(desired_paths))
    hidden = [
        path
        for path in ids_to_paths(current_ids, id_to_path)
        if path not in desired
        and is_orphaned_path_for_expanded_set(path, desired, path_to_id, flatten, child_count)
    ]
    if hidden:
        logger.debug("preserving %d hidden expanded paths", len(hidden))
    return paths_to_ids(hidden, path_to_id, flatten)
