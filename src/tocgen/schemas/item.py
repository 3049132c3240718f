"""Heading tree node."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from tocgen.exceptions import TreeStructureError


@dataclass(eq=False)
class Item:
    """A heading in the table of contents tree.

    Children are owned by their parent's ``children`` list. ``parent`` is a
    back-reference used only to walk upwards; it is set by the tree and never
    copied, so a deep copy of an item is a detached subtree whose children
    link to the copy. Items compare by identity, so two headings with the
    same title are still distinct siblings.

    Attributes:
        id: Anchor identifier of the heading.
        title: Display text, substituted into templates as is.
        level: Heading depth. Level 0 is reserved for the synthetic root.
        children: Child headings in document order.
        parent: The item whose ``children`` hold this item, None when detached.
    """

    id: str = ""
    title: str = ""
    level: int = 0
    children: list[Item] = field(default_factory=list)
    parent: Item | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        children, self.children = self.children, []
        for child in children:
            # Children already in another tree are copied, not taken over.
            if child.parent is not None:
                child = copy.deepcopy(child)
            self.append_child(child)

    def __deepcopy__(self, memo: dict) -> Item:
        clone = type(self)(id=self.id, title=self.title, level=self.level)
        memo[id(self)] = clone
        for child in self.children:
            clone.append_child(copy.deepcopy(child, memo))
        return clone

    @classmethod
    def root(cls) -> Item:
        """Create the synthetic level-0 root that holds top-level headings."""
        return cls(level=0)

    @property
    def is_root(self) -> bool:
        return self.level == 0 and self.parent is None

    def append_child(self, child: Item) -> Item:
        """Add ``child`` after the existing children and link it back to self."""
        self.children.append(child)
        child.parent = self
        return child

    def has_children(self) -> bool:
        return bool(self.children)

    def position_among_siblings(self) -> int:
        """Return the 1-based index of this item within its parent's children.

        Raises:
            TreeStructureError: If the item has no parent (the root, or a
                detached subtree, is never numbered) or is missing from its
                parent's children.
        """
        parent = self.parent
        if parent is None:
            raise TreeStructureError(
                f"Cannot number item {self.id!r} at level {self.level}: it has no parent"
            )
        for index, sibling in enumerate(parent.children, start=1):
            if sibling is self:
                return index
        raise TreeStructureError(
            f"Item {self.id!r} is not among the children of its parent {parent.id!r}"
        )
