"""Shared schemas for tocgen."""

from tocgen.schemas.heading import Heading
from tocgen.schemas.item import Item
from tocgen.schemas.result import TocResult
from tocgen.schemas.template import TocTemplate

__all__ = ["Heading", "Item", "TocResult", "TocTemplate"]
