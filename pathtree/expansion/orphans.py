"""Filtering of expanded paths whose visible ancestors are collapsed.

An expanded descendant under a collapsed folder is still remembered
internally, but reporting it outward would make a controlled caller feed it
back and re-open the collapsed branch. Interior directories of a flattened
chain are never rendered on their own, so their absence never orphans a
descendant while flattening is enabled.
"""

from __future__ import annotations

from collections.abc import Container, Iterable, Mapping

from ..constants import FLATTENED_PREFIX
from .paths import path_prefixes, strip_flattened_prefix


def build_direct_child_count_map(path_to_id: Mapping[str, str]) -> dict[str, int]:
    """Count direct children per directory path, ignoring flattened entries."""
    counts: dict[str, int] = {}
    for path in path_to_id:
        if path.startswith(FLATTENED_PREFIX):
            continue
        slash_idx = path.rfind("/")
        if slash_idx < 0:
            continue
        parent = path[:slash_idx]
        counts[parent] = counts.get(parent, 0) + 1
    return counts


def _is_registered(path: str, path_to_id: Mapping[str, str]) -> bool:
    return path in path_to_id or (FLATTENED_PREFIX + path) in path_to_id


def visible_ancestors(
    path: str,
    path_to_id: Mapping[str, str],
    flatten: bool = False,
    child_count: Mapping[str, int] | None = None,
) -> list[str]:
    """Return the ancestors of ``path`` that must be expanded for it to show.

    Unregistered prefixes are skipped. With ``flatten``, a single-child
    ancestor whose chain reaches a registered flattened id along ``path`` is
    interior and skipped too. Order is deepest first.
    """
    unprefixed = strip_flattened_prefix(path)
    ancestors = path_prefixes(unprefixed)[:-1]
    if not ancestors:
        return []
    if flatten and child_count is None:
        child_count = build_direct_child_count_map(path_to_id)

    required: list[str] = []
    in_chain = flatten and (FLATTENED_PREFIX + unprefixed) in path_to_id
    for ancestor in reversed(ancestors):
        interior = in_chain and child_count is not None and child_count.get(ancestor, 0) == 1
        if flatten:
            in_chain = interior or (FLATTENED_PREFIX + ancestor) in path_to_id
        if interior:
            continue
        if _is_registered(ancestor, path_to_id):
            required.append(ancestor)
    return required


def is_orphaned_path_for_expanded_set(
    path: str,
    expanded: Container[str],
    path_to_id: Mapping[str, str],
    flatten: bool = False,
    child_count: Mapping[str, int] | None = None,
) -> bool:
    """Return whether some visible ancestor of ``path`` is missing from ``expanded``."""
    return any(
        ancestor not in expanded
        for ancestor in visible_ancestors(path, path_to_id, flatten, child_count)
    )


def filter_orphaned(
    paths: Iterable[str],
    path_to_id: Mapping[str, str],
    flatten: bool = False,
    child_count: Mapping[str, int] | None = None,
) -> list[str]:
    """Drop paths whose visible ancestors are not all in ``paths``.

    Input order is preserved and duplicates are removed. Applying the filter
    to its own output returns the same list.
    """
    unique = list(dict.fromkeys(paths))
    if not unique:
        return []
    expanded = set(unique)
    if flatten and child_count is None:
        child_count = build_direct_child_count_map(path_to_id)
    return [
        path
        for path in unique
        if not is_orphaned_path_for_expanded_set(path, expanded, path_to_id, flatten, child_count)
    ]
