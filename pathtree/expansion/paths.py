"""Pure helpers over slash-delimited path strings."""

from __future__ import annotations

from collections.abc import Iterable

from ..constants import FLATTENED_PREFIX, ROOT_ID


def strip_flattened_prefix(path: str) -> str:
    """Return ``path`` without the flattened-node prefix, if present."""
    if path.startswith(FLATTENED_PREFIX):
        return path[len(FLATTENED_PREFIX) :]
    return path


def path_prefixes(path: str) -> list[str]:
    """Return every prefix of ``path`` from shallowest to the full path.

    >>> path_prefixes("a/b/c")
    ['a', 'a/b', 'a/b/c']
    """
    if not path:
        return []
    prefixes: list[str] = []
    current = ""
    for part in path.split("/"):
        current = part if not current else f"{current}/{part}"
        prefixes.append(current)
    return prefixes


def path_depth(path: str) -> int:
    return path.count("/") + 1


def expand_implicit_parent_directories(paths: Iterable[str]) -> list[str]:
    """Expand deep paths into an explicit list including every ancestor.

    ``["a/b/c"]`` becomes ``["a", "a/b", "a/b/c"]``. Flattened prefixes are
    stripped; empty and root entries are ignored. Output is ordered shallow
    before deep, then lexically.
    """
    out: set[str] = set()
    for raw in paths:
        path = strip_flattened_prefix(raw)
        if not path or path == ROOT_ID:
            continue
        out.update(path_prefixes(path))
    return sorted(out, key=lambda item: (path_depth(item), item))
