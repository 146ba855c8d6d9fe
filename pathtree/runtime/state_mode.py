"""Controlled vs uncontrolled expand/select state configuration.

The mode is resolved once when a tree is constructed. Uncontrolled trees use
their defaults a single time; controlled trees treat every pushed path list as
the new truth.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class FileTreeSelectionItem:
    path: str
    is_folder: bool


ExpandedChangeCallback = Callable[[list[str]], None]
SelectedChangeCallback = Callable[[list[str]], None]
SelectionCallback = Callable[[list[FileTreeSelectionItem]], None]


@dataclass
class FileTreeCallbacks:
    on_expanded_items_change: ExpandedChangeCallback | None = None
    on_selected_items_change: SelectedChangeCallback | None = None
    on_selection: SelectionCallback | None = None


@dataclass
class FileTreeStateConfig:
    """Caller-facing state options; all lists are paths, never ids."""

    default_expanded_items: list[str] | None = None
    default_selected_items: list[str] | None = None
    expanded_items: list[str] | None = None
    selected_items: list[str] | None = None
    on_expanded_items_change: ExpandedChangeCallback | None = None
    on_selected_items_change: SelectedChangeCallback | None = None
    on_selection: SelectionCallback | None = None

    def callbacks(self) -> FileTreeCallbacks:
        return FileTreeCallbacks(
            on_expanded_items_change=self.on_expanded_items_change,
            on_selected_items_change=self.on_selected_items_change,
            on_selection=self.on_selection,
        )


@dataclass(frozen=True)
class Uncontrolled:
    default_expanded_items: tuple[str, ...] = ()
    default_selected_items: tuple[str, ...] = ()

    @property
    def initial_expanded_items(self) -> tuple[str, ...]:
        return self.default_expanded_items

    @property
    def initial_selected_items(self) -> tuple[str, ...]:
        return self.default_selected_items


@dataclass(frozen=True)
class Controlled:
    """Externally owned state; unset lists fall back to their defaults."""

    expanded_items: tuple[str, ...] = ()
    selected_items: tuple[str, ...] = ()

    @property
    def initial_expanded_items(self) -> tuple[str, ...]:
        return self.expanded_items

    @property
    def initial_selected_items(self) -> tuple[str, ...]:
        return self.selected_items


StateMode = Uncontrolled | Controlled


def resolve_state_mode(config: FileTreeStateConfig) -> StateMode:
    """Pick the state variant from which lists the caller supplied."""
    if config.expanded_items is None and config.selected_items is None:
        return Uncontrolled(
            default_expanded_items=tuple(config.default_expanded_items or ()),
            default_selected_items=tuple(config.default_selected_items or ()),
        )
    expanded = config.expanded_items if config.expanded_items is not None else config.default_expanded_items
    selected = config.selected_items if config.selected_items is not None else config.default_selected_items
    return Controlled(
        expanded_items=tuple(expanded or ()),
        selected_items=tuple(selected or ()),
    )
