"""Path-level reconciler over an id-level tree instance.

Callers only ever pass and receive path strings. Translation to ids goes
through the identifier maps built for the current file list, and expanded
descendants hidden under a collapsed folder are kept internally so reopening
the folder restores them.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from ..constants import FLATTENED_PREFIX, ROOT_ID
from ..expansion import (
    build_direct_child_count_map,
    controlled_expanded_paths_to_expanded_ids,
    expanded_ids_to_controlled_expanded_paths,
    hidden_expanded_ids_to_preserve,
    ids_to_paths,
    paths_to_ids,
    resolve_path_id,
)
from ..file_tree_model import (
    FileTreeData,
    IdentifierMaps,
    ReservedPathError,
    build_identifier_maps,
    build_tree,
)
from ..tree_pane import IndexedTree, SyncDataLoader, TreeRow
from . import config as app_config
from .state_mode import (
    FileTreeCallbacks,
    FileTreeSelectionItem,
    FileTreeStateConfig,
    StateMode,
    resolve_state_mode,
)

logger = logging.getLogger(__name__)

_instance_ids = itertools.count()


@dataclass
class FileTreeOptions:
    files: list[str] = field(default_factory=list)
    id: str | None = None
    flatten_empty_directories: bool = False
    root_name: str | None = None

    @classmethod
    def from_config(cls, files: list[str], **overrides: object) -> FileTreeOptions:
        """Seed flattening and root name from the persisted config."""
        options = cls(
            files=list(files),
            flatten_empty_directories=app_config.load_flatten_empty_directories(),
            root_name=app_config.load_root_name(),
        )
        return replace(options, **overrides) if overrides else options


class FileTree:
    """Expand/select state for one file list, exposed purely as paths."""

    def __init__(self, options: FileTreeOptions, state_config: FileTreeStateConfig | None = None) -> None:
        self.options = options
        self.state_config = state_config if state_config is not None else FileTreeStateConfig()
        self.state_mode: StateMode = resolve_state_mode(self.state_config)
        self.callbacks: FileTreeCallbacks = self.state_config.callbacks()
        self.id = options.id if options.id is not None else f"ft_{next(_instance_ids)}"
        self._expand_cache: dict[str, tuple[str, ...]] = {}
        self._rebuild()

        self.tree.apply_expanded(
            controlled_expanded_paths_to_expanded_ids(
                self.state_mode.initial_expanded_items,
                self.path_to_id,
                self.flatten,
                self._expand_cache,
            )
        )
        self.tree.apply_selected(paths_to_ids(self.state_mode.initial_selected_items, self.path_to_id, self.flatten))

    # --- Structure ---

    @property
    def flatten(self) -> bool:
        return self.options.flatten_empty_directories

    @property
    def path_to_id(self) -> Mapping[str, str]:
        return self.maps.path_to_id

    @property
    def id_to_path(self) -> Mapping[str, str]:
        return self.maps.id_to_path

    def _rebuild(self) -> None:
        self.data: FileTreeData = build_tree(self.options.files, root_name=self.options.root_name)
        self.maps: IdentifierMaps = build_identifier_maps(self.data, ROOT_ID)
        self._child_count = build_direct_child_count_map(self.maps.path_to_id)
        # Interior chain member -> flattened id of the chain it belongs to.
        self._chain_of: dict[str, str] = {
            member: node_id
            for node_id, node in self.data.items()
            if node.collapses is not None
            for member in node.collapses[:-1]
        }
        self._expand_cache.clear()
        self.tree = IndexedTree(SyncDataLoader(self.data, self.flatten), ROOT_ID)
        logger.debug("file tree %s rebuilt from %d paths", self.id, len(self.options.files))

    def _restructure(self) -> None:
        """Rebuild maps and carry every internal id over by path, hidden ones included."""
        expanded_paths = ids_to_paths(self.tree.expanded_ids, self.id_to_path)
        selected_paths = ids_to_paths(self.tree.selected_ids, self.id_to_path)
        self._rebuild()
        expanded_ids = paths_to_ids(expanded_paths, self.path_to_id, self.flatten)
        if self.flatten:
            # A chain row is only open when every directory it absorbs was open.
            kept = set(expanded_paths)
            expanded_ids = [
                node_id
                for node_id in expanded_ids
                if all(member in kept for member in (self.data[node_id].collapses or ())[:-1])
            ]
        self.tree.apply_expanded(expanded_ids)
        self.tree.apply_selected(paths_to_ids(selected_paths, self.path_to_id, self.flatten))

    def set_files(self, files: list[str]) -> None:
        """Rebuild for a new file list; a rejected list leaves the tree untouched."""
        previous = self.options
        self.options = replace(self.options, files=list(files))
        try:
            self._restructure()
        except ReservedPathError:
            self.options = previous
            raise

    def set_options(
        self,
        *,
        flatten_empty_directories: bool | None = None,
        root_name: str | None = None,
        state: FileTreeStateConfig | None = None,
    ) -> None:
        """Apply structural options, then callback and controlled-state updates."""
        structural: dict[str, object] = {}
        if flatten_empty_directories is not None and flatten_empty_directories != self.flatten:
            structural["flatten_empty_directories"] = flatten_empty_directories
        if root_name is not None and root_name != self.options.root_name:
            structural["root_name"] = root_name
        if structural:
            self.options = replace(self.options, **structural)
            self._restructure()

        if state is None:
            return
        self.set_callbacks(
            on_expanded_items_change=state.on_expanded_items_change,
            on_selected_items_change=state.on_selected_items_change,
            on_selection=state.on_selection,
        )
        if state.expanded_items is not None:
            self.set_expanded_items(state.expanded_items)
        if state.selected_items is not None:
            self.set_selected_items(state.selected_items)

    def set_callbacks(self, **callbacks: object) -> None:
        """Replace the given callbacks; ``None`` values leave a callback unchanged."""
        for name, callback in callbacks.items():
            if not hasattr(self.callbacks, name):
                raise TypeError(f"unknown callback {name!r}")
            if callback is not None:
                setattr(self.callbacks, name, callback)

    # --- Expanded state ---

    def _commit_expanded(self, ids: list[str]) -> None:
        before = self.tree.expanded_ids
        self.tree.apply_expanded(ids)
        if set(before) == set(ids):
            return
        if self.callbacks.on_expanded_items_change is not None:
            self.callbacks.on_expanded_items_change(self.get_expanded_items())

    def set_expanded_items(self, paths: list[str]) -> None:
        """Replace expansion with ``paths`` and their ancestors.

        Expanded descendants of folders that ``paths`` leaves collapsed stay in
        the internal set without being reported by ``get_expanded_items``.
        """
        preserved = hidden_expanded_ids_to_preserve(
            self.tree.expanded_ids,
            paths,
            self.id_to_path,
            self.path_to_id,
            self.flatten,
            self._child_count,
        )
        ids = controlled_expanded_paths_to_expanded_ids(paths, self.path_to_id, self.flatten, self._expand_cache)
        self._commit_expanded(list(dict.fromkeys([*ids, *preserved])))

    def get_expanded_items(self) -> list[str]:
        return expanded_ids_to_controlled_expanded_paths(
            self.tree.expanded_ids,
            self.id_to_path,
            self.path_to_id,
            self.flatten,
            self._child_count,
        )

    def expand_item(self, path: str) -> None:
        """Expand ``path`` and its ancestors, keeping previously hidden subtree state."""
        ids = controlled_expanded_paths_to_expanded_ids([path], self.path_to_id, self.flatten, self._expand_cache)
        if not ids:
            return
        self._commit_expanded(list(dict.fromkeys([*self.tree.expanded_ids, *ids])))

    def collapse_item(self, path: str) -> None:
        """Collapse ``path`` by dropping both its regular and flattened ids.

        Descendant ids are left alone, so they become hidden state. With
        flattening, an interior chain directory has no row of its own, so the
        whole chain row it belongs to is collapsed instead.
        """
        candidates = [self.path_to_id.get(path), self.path_to_id.get(FLATTENED_PREFIX + path)]
        chain_id = self._chain_of.get(path) if self.flatten else None
        if chain_id is not None:
            candidates.append(chain_id)
            candidates.extend(self.data[chain_id].collapses or ())
        to_remove = {node_id for node_id in candidates if node_id is not None}
        if not to_remove:
            return
        self._commit_expanded([node_id for node_id in self.tree.expanded_ids if node_id not in to_remove])

    def toggle_item_expanded(self, path: str) -> None:
        node_id = resolve_path_id(path, self.path_to_id, self.flatten)
        if node_id is None:
            return
        if self.tree.is_expanded(node_id):
            self.collapse_item(path)
        else:
            self.expand_item(path)

    # --- Selected state ---

    def set_selected_items(self, paths: list[str]) -> None:
        ids = paths_to_ids(paths, self.path_to_id, self.flatten)
        before = self.tree.selected_ids
        self.tree.apply_selected(ids)
        if before == ids:
            return
        selected = self.get_selected_items()
        if self.callbacks.on_selected_items_change is not None:
            self.callbacks.on_selected_items_change(selected)
        if self.callbacks.on_selection is not None:
            self.callbacks.on_selection(self._selection_items())

    def get_selected_items(self) -> list[str]:
        return ids_to_paths(self.tree.selected_ids, self.id_to_path)

    def _selection_items(self) -> list[FileTreeSelectionItem]:
        items: dict[str, FileTreeSelectionItem] = {}
        for node_id in self.tree.selected_ids:
            for path in ids_to_paths([node_id], self.id_to_path):
                if path not in items:
                    items[path] = FileTreeSelectionItem(path=path, is_folder=self.tree.is_folder(node_id))
        return list(items.values())

    # --- Rows ---

    def get_items(self) -> list[TreeRow]:
        return self.tree.get_items()
