"""tocgen: render numbered tables of contents from heading trees."""

from tocgen.exceptions import (
    FetchError,
    ParseError,
    TemplateError,
    TocgenError,
    TreeStructureError,
)
from tocgen.positioner import ItemNumber, compute_number, iter_numbered
from tocgen.renderer import TocRenderer, render_toc
from tocgen.schemas import Heading, Item, TocResult, TocTemplate
from tocgen.toc import TocOptions, build_toc
from tocgen.tree import build_item_tree, count_items

__all__ = [
    "FetchError",
    "Heading",
    "Item",
    "ItemNumber",
    "ParseError",
    "TemplateError",
    "TocOptions",
    "TocRenderer",
    "TocResult",
    "TocTemplate",
    "TocgenError",
    "TreeStructureError",
    "build_item_tree",
    "build_toc",
    "compute_number",
    "count_items",
    "iter_numbered",
    "render_toc",
]
