"""Hierarchical outline numbering for heading trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from tocgen.schemas import Item


@dataclass(frozen=True)
class ItemNumber:
    """Outline number of a heading, split the way templates consume it.

    Attributes:
        levels: Dotted prefix built from the ancestors' positions, e.g. "2.1.".
            Empty for top-level headings.
        segment: The heading's own position. Top-level headings carry a
            trailing dot ("2."), nested ones do not ("3").
    """

    levels: str
    segment: str

    @property
    def label(self) -> str:
        return self.levels + self.segment


def compute_number(item: Item) -> ItemNumber:
    """Compute the outline number of a non-root item.

    Level-1 items are numbered by their position alone ("N."). Deeper items
    are prefixed with the positions of their ancestors up to and including
    the nearest level-1 ancestor ("M.N" for a level-2 child of the Mth
    section). The synthetic root is never part of the prefix.

    Trees whose levels skip (a level-3 heading directly under a level-1 one)
    still get a dotted number, but it need not form a clean outline. An item
    deeper than level 1 that hangs directly off the root is numbered like a
    top-level item.

    Raises:
        TreeStructureError: If ``item``, or an ancestor it is numbered by,
            has no parent (the root or the top of a detached subtree).
    """
    position = item.position_among_siblings()
    parent = item.parent
    if item.level <= 1 or parent is None or parent.is_root:
        return ItemNumber(levels="", segment=f"{position}.")

    return ItemNumber(levels=_levels_prefix(parent), segment=str(position))


def _levels_prefix(ancestor: Item) -> str:
    positions = [ancestor.position_among_siblings()]
    while ancestor.level > 1:
        next_ancestor = ancestor.parent
        if next_ancestor is None or next_ancestor.is_root:
            break
        ancestor = next_ancestor
        positions.append(ancestor.position_among_siblings())

    positions.reverse()
    return ".".join(str(position) for position in positions) + "."


def iter_numbered(root: Item) -> Iterator[tuple[Item, ItemNumber]]:
    """Yield every descendant of ``root`` with its number, depth first."""
    for child in root.children:
        yield child, compute_number(child)
        yield from iter_numbered(child)
