"""Node datatypes for path-derived file trees."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileTreeNodeChildren:
    """Child ids of a directory node.

    ``direct`` lists every real directory level. ``collapsed`` is only set when
    flattening single-child chains changes which ids are children.
    """

    direct: tuple[str, ...] = ()
    collapsed: tuple[str, ...] | None = None

    def for_mode(self, flatten: bool) -> tuple[str, ...]:
        """Return the child list used by the given flattening mode."""
        if flatten and self.collapsed is not None:
            return self.collapsed
        return self.direct


@dataclass(frozen=True)
class FileTreeNode:
    """One tree-map entry; ``children`` is ``None`` for files."""

    name: str
    children: FileTreeNodeChildren | None = None
    collapses: tuple[str, ...] | None = None

    @property
    def is_folder(self) -> bool:
        return self.children is not None

    def to_dict(self) -> dict[str, object]:
        """Serialize with the same optional-key shape loaders consume."""
        out: dict[str, object] = {"name": self.name}
        if self.children is not None:
            children: dict[str, object] = {"direct": list(self.children.direct)}
            if self.children.collapsed is not None:
                children["collapsed"] = list(self.children.collapsed)
            out["children"] = children
        if self.collapses is not None:
            out["collapses"] = list(self.collapses)
        return out


FileTreeData = dict[str, FileTreeNode]
