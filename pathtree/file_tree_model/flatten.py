"""Single-child directory chain detection for flattened tree views.

A chain starts at a directory whose only child is another directory and
follows unique children until a directory has zero or several children, or
its only child is a file. Chains are collapsed into one synthetic node keyed
by ``FLATTENED_PREFIX + endpoint``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..constants import FLATTENED_PREFIX


def _first_child(children: Mapping[str, None]) -> str | None:
    return next(iter(children), None)


def last_segment(path: str) -> str:
    """Return the display name for ``path`` (text after the last slash)."""
    return path.rsplit("/", 1)[-1]


class FlatteningResolver:
    """Resolve chain endpoints over a folder -> ordered children mapping.

    Endpoint lookups are memoized per starting directory so shared chain
    suffixes are only walked once.
    """

    def __init__(self, folder_children: Mapping[str, Mapping[str, None]]) -> None:
        self._folder_children = folder_children
        self._endpoint_cache: dict[str, str | None] = {}

    def is_folder(self, path: str) -> bool:
        return path in self._folder_children

    def flattened_endpoint(self, start: str) -> str | None:
        """Return the deepest directory of the chain starting at ``start``.

        ``None`` means ``start`` does not begin a chain of two or more
        directories.
        """
        if start in self._endpoint_cache:
            return self._endpoint_cache[start]

        walked = [start]
        current = start
        endpoint: str | None = None
        while True:
            children = self._folder_children.get(current)
            if children is None or len(children) != 1:
                break
            only_child = _first_child(children)
            if only_child is None or not self.is_folder(only_child):
                break
            if only_child in self._endpoint_cache:
                endpoint = self._endpoint_cache[only_child] or only_child
                break
            endpoint = only_child
            current = only_child
            walked.append(current)

        # Every directory walked before the endpoint shares it.
        for folder in walked:
            self._endpoint_cache[folder] = endpoint if folder != endpoint else None
        return endpoint

    def chain_folders(self, start: str, endpoint: str) -> list[str]:
        """List chain directories from ``start`` to ``endpoint`` inclusive."""
        folders = [start]
        current = start
        while current != endpoint:
            children = self._folder_children.get(current)
            if children is None or len(children) != 1:
                break
            current = _first_child(children)
            if current is None:
                break
            folders.append(current)
        return folders

    @staticmethod
    def flattened_name(start: str, endpoint: str) -> str:
        """Join ``start``'s own name with the relative path to ``endpoint``."""
        start_name = last_segment(start)
        suffix = endpoint[len(start) + 1 :]
        return f"{start_name}/{suffix}" if suffix else start_name

    def collapsed_children(self, direct: Sequence[str]) -> list[str] | None:
        """Return children with chains replaced by flattened ids.

        Returns ``None`` when no child starts a chain, so callers can omit the
        second list entirely.
        """
        collapsed: list[str] | None = None
        for idx, child in enumerate(direct):
            endpoint = self.flattened_endpoint(child) if self.is_folder(child) else None
            if endpoint is not None:
                if collapsed is None:
                    collapsed = list(direct[:idx])
                collapsed.append(f"{FLATTENED_PREFIX}{endpoint}")
            elif collapsed is not None:
                collapsed.append(child)
        return collapsed
