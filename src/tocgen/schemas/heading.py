"""Flat heading model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Heading(BaseModel):
    """A heading extracted from a document, before it is placed in a tree."""

    id: str = ""
    title: str = ""
    level: int = Field(..., ge=1)
