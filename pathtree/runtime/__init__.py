"""Path-level tree state orchestration.

Groups the ``FileTree`` reconciler, the controlled/uncontrolled state
variants it resolves at construction, and persisted config defaults.
"""

from __future__ import annotations

from .file_tree import FileTree, FileTreeOptions
from .state_mode import (
    Controlled,
    FileTreeCallbacks,
    FileTreeSelectionItem,
    FileTreeStateConfig,
    StateMode,
    Uncontrolled,
    resolve_state_mode,
)

__all__ = [
    "FileTree",
    "FileTreeOptions",
    "Controlled",
    "FileTreeCallbacks",
    "FileTreeSelectionItem",
    "FileTreeStateConfig",
    "StateMode",
    "Uncontrolled",
    "resolve_state_mode",
]
