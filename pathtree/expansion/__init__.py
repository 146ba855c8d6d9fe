"""Expand/collapse state helpers expressed over paths and ids.

Includes ancestor expansion for making paths visible, orphan filtering for
reporting only visible expanded folders, and the conversions the reconciler
uses in both directions.
"""

from __future__ import annotations

from .paths import expand_implicit_parent_directories, path_prefixes, strip_flattened_prefix
from .ancestors import expand_with_ancestors, resolve_path_id
from .orphans import (
    build_direct_child_count_map,
    filter_orphaned,
    is_orphaned_path_for_expanded_set,
    visible_ancestors,
)
from .controlled import (
    controlled_expanded_paths_to_expanded_ids,
    expanded_ids_to_controlled_expanded_paths,
    hidden_expanded_ids_to_preserve,
    ids_to_paths,
    paths_to_ids,
)

__all__ = [
    "expand_implicit_parent_directories",
    "path_prefixes",
    "strip_flattened_prefix",
    "expand_with_ancestors",
    "resolve_path_id",
    "build_direct_child_count_map",
    "filter_orphaned",
    "is_orphaned_path_for_expanded_set",
    "visible_ancestors",
    "controlled_expanded_paths_to_expanded_ids",
    "expanded_ids_to_controlled_expanded_paths",
    "hidden_expanded_ids_to_preserve",
    "ids_to_paths",
    "paths_to_ids",
]
