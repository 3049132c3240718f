"""Render heading trees into nested ToC markup."""

from __future__ import annotations

import re

from tocgen.positioner import compute_number
from tocgen.schemas import Item, TocTemplate

_PLACEHOLDER_RE = re.compile(r"\{(id|levels|itemnumber|title)\}")


class TocRenderer:
    """Render the descendants of a root item with a :class:`TocTemplate`.

    The renderer keeps no state between calls, so one instance can render any
    number of trees, including concurrently.
    """

    def __init__(self, template: TocTemplate | None = None) -> None:
        self.template = template if template is not None else TocTemplate()

    def render(self, root: Item) -> str:
        """Return the markup for every descendant of ``root``.

        The root itself is not rendered; a root without children yields an
        empty string.
        """
        parts: list[str] = []
        self._render_children(root, parts)
        return "".join(parts)

    def replace_tokens(self, item: Item) -> str:
        """Substitute the item's id, number and title into ``item_format``.

        Values are inserted verbatim, without escaping. Each placeholder is
        replaced in a single pass, so placeholder-like text inside a title or
        id is left alone.
        """
        number = compute_number(item)
        values = {
            "id": item.id or "",
            "levels": number.levels,
            "itemnumber": number.segment,
            "title": item.title or "",
        }
        return _PLACEHOLDER_RE.sub(
            lambda match: values[match.group(1)], self.template.item_format
        )

    def _render_children(self, parent: Item, parts: list[str]) -> None:
        template = self.template
        for item in parent.children:
            parts.append(template.item_start)
            parts.append(self.replace_tokens(item))

            if item.has_children():
                parts.append(template.level_start)
                self._render_children(item, parts)
                parts.append(template.level_end)

            parts.append(template.item_end)


def render_toc(root: Item, template: TocTemplate | None = None) -> str:
    """Render ``root`` with ``template`` (the default HTML list when omitted)."""
    return TocRenderer(template).render(root)
