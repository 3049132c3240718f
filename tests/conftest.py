"""Test setup for tocgen."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tocgen.schemas import Item  # noqa: E402


def make_item(parent: Item, title: str, level: int | None = None) -> Item:
    """Append a child to ``parent`` using the title as a lowercase id."""
    item = Item(
        id=title.lower().replace(" ", "-"),
        title=title,
        level=parent.level + 1 if level is None else level,
    )
    return parent.append_child(item)


@pytest.fixture
def outline() -> Item:
    """A small well-formed document outline.

    1. Intro
    2. Methods
       2.1 Data
           2.1.1 Sources
       2.2 Models
    3. Results
    """
    root = Item.root()
    make_item(root, "Intro")
    methods = make_item(root, "Methods")
    data = make_item(methods, "Data")
    make_item(data, "Sources")
    make_item(methods, "Models")
    make_item(root, "Results")
    return root


@pytest.fixture
def add_item():
    """Factory appending a child item to a parent."""
    return make_item
