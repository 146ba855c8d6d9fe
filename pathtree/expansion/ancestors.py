"""Path -> id resolution including every ancestor needed for visibility."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping

from ..constants import FLATTENED_PREFIX
from .paths import path_prefixes, strip_flattened_prefix


def resolve_path_id(path: str, path_to_id: Mapping[str, str], flatten: bool) -> str | None:
    """Map one path to the id visible in the given flattening mode.

    Prefixed paths are looked up literally. With ``flatten`` the flattened id
    wins when registered; otherwise the regular id is used. Unknown paths
    resolve to ``None``.
    """
    if path.startswith(FLATTENED_PREFIX):
        return path_to_id.get(path)
    if flatten:
        flattened_id = path_to_id.get(FLATTENED_PREFIX + path)
        if flattened_id is not None:
            return flattened_id
    return path_to_id.get(path)


def _ancestor_ids(path: str, path_to_id: Mapping[str, str], flatten: bool) -> tuple[str, ...]:
    literal = path.startswith(FLATTENED_PREFIX)
    prefixes = path_prefixes(strip_flattened_prefix(path))
    ids: list[str] = []
    for idx, prefix in enumerate(prefixes):
        if literal and idx == len(prefixes) - 1:
            node_id = path_to_id.get(path)
        else:
            node_id = resolve_path_id(prefix, path_to_id, flatten)
        if node_id is not None:
            ids.append(node_id)
    return tuple(ids)


def expand_with_ancestors(
    paths: Iterable[str],
    path_to_id: Mapping[str, str],
    flatten: bool = False,
    cache: MutableMapping[str, tuple[str, ...]] | None = None,
) -> list[str]:
    """Return ids for every path plus all of its ancestors.

    Result order is first-seen and contains no duplicates. ``cache`` is keyed
    by the literal input path and must be cleared by the owner whenever
    ``path_to_id`` or ``flatten`` change.
    """
    out: dict[str, None] = {}
    for path in paths:
        ids = cache.get(path) if cache is not None else None
        if ids is None:
            ids = _ancestor_ids(path, path_to_id, flatten)
            if cache is not None:
                cache[path] = ids
        for node_id in ids:
            out[node_id] = None
    return list(out)
