"""Id-level tree instance, eager loader, and visible-row projection."""

from __future__ import annotations

from .loader import SyncDataLoader
from .tree import IndexedTree
from .types import TreeRow

__all__ = ["SyncDataLoader", "IndexedTree", "TreeRow"]
