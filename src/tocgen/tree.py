"""Build heading trees from flat heading lists."""

from __future__ import annotations

from typing import Iterable

from tocgen.schemas import Heading, Item


def build_item_tree(headings: Iterable[Heading]) -> Item:
    """Place document-order headings under a synthetic level-0 root.

    Each heading becomes a child of the closest preceding heading with a lower
    level, or of the root when there is none. Levels are kept as given, so a
    jump from level 1 to level 3 produces a level-3 child of a level-1 item.
    """
    root = Item.root()
    stack: list[Item] = []

    for heading in headings:
        item = Item(id=heading.id, title=heading.title, level=heading.level)

        while stack and stack[-1].level >= item.level:
            stack.pop()

        parent = stack[-1] if stack else root
        parent.append_child(item)
        stack.append(item)

    return root


def count_items(root: Item) -> int:
    """Count all items below ``root``."""
    total = 0
    for child in root.children:
        total += 1
        total += count_items(child)
    return total
