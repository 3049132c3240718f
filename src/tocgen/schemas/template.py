"""ToC template configuration."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tocgen.exceptions import TemplateError

DEFAULT_ITEM_FORMAT = '<a href="#{id}">{levels}{itemnumber}&nbsp;{title}</a>'


class TocTemplate(BaseModel):
    """Markup fragments used to render a table of contents.

    ``item_format`` may contain the ``{id}``, ``{levels}``, ``{itemnumber}``
    and ``{title}`` placeholders. Every slot also accepts its camelCase name
    (``itemStart``, ``levelEnd``...) when built from a mapping.

    Attributes:
        item_start: Emitted before every heading entry.
        item_end: Emitted after every heading entry and its nested block.
        level_start: Opens the nested block of a heading's children.
        level_end: Closes the nested block of a heading's children.
        item_format: Template for the heading entry itself.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    item_start: str = Field("<li>", alias="itemStart")
    item_end: str = Field("</li>", alias="itemEnd")
    level_start: str = Field("<ul>", alias="levelStart")
    level_end: str = Field("</ul>", alias="levelEnd")
    item_format: str = Field(DEFAULT_ITEM_FORMAT, alias="itemFormat")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> TocTemplate:
        """Build a template from a plain mapping of options.

        Raises:
            TemplateError: If an option is unknown or not a string.
        """
        try:
            return cls.model_validate(dict(options))
        except ValidationError as exc:
            raise TemplateError(f"Invalid ToC template: {exc}") from exc
