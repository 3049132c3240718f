"""Pipeline output model."""

from __future__ import annotations

from pydantic import BaseModel


class TocResult(BaseModel):
    """Document with its table of contents inserted."""

    html: str
    toc: str
    heading_count: int
