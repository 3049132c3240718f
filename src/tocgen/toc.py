"""Insert a rendered table of contents into an HTML document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from html import escape

from tocgen.config import TOCGEN_TOKEN
from tocgen.html_parser import parse_headings
from tocgen.renderer import TocRenderer
from tocgen.schemas import Heading, TocResult, TocTemplate
from tocgen.tree import build_item_tree, count_items

logger = logging.getLogger(__name__)


@dataclass
class TocOptions:
    """Options for ToC insertion.

    Attributes:
        template: Markup fragments for the ToC entries.
        token: Placeholder in the document replaced by the ToC.
        wrapper_start: Emitted before the outermost list. Defaults to a
            ``<div class="toc">`` followed by the template's ``level_start``.
        wrapper_end: Emitted after the outermost list. Defaults to the
            template's ``level_end`` followed by ``</div>``.
        min_level: Smallest heading tag number included in the ToC.
        max_level: Largest heading tag number included in the ToC.
    """

    template: TocTemplate = field(default_factory=TocTemplate)
    token: str = TOCGEN_TOKEN
    wrapper_start: str | None = None
    wrapper_end: str | None = None
    min_level: int = 1
    max_level: int = 6


def build_toc(html: str, *, options: TocOptions | None = None) -> TocResult:
    """Replace every ToC token in ``html`` with a numbered table of contents.

    Headings get anchor ids where they have none, so the ToC links resolve.
    Heading titles and ids are HTML-escaped before they reach the template.
    The document is re-serialized by BeautifulSoup with the html5 formatter:
    named entities and void tags survive, but attribute quoting, non-ASCII
    characters (written as named entities where one exists) and whitespace
    around a doctype may be normalized.
    A document without the token is returned untouched; a document without
    headings has the token removed.
    """
    opts = options or TocOptions()

    if opts.token not in html:
        logger.debug("No %r token in document, skipping ToC", opts.token)
        return TocResult(html=html, toc="", heading_count=0)

    parsed = parse_headings(html, min_level=opts.min_level, max_level=opts.max_level)
    root = build_item_tree(_escape_heading(heading) for heading in parsed.headings)
    heading_count = count_items(root)

    toc = ""
    if heading_count:
        body = TocRenderer(opts.template).render(root)
        toc = _wrapper_start(opts) + body + _wrapper_end(opts)

    return TocResult(
        html=parsed.html.replace(opts.token, toc),
        toc=toc,
        heading_count=heading_count,
    )


def _wrapper_start(opts: TocOptions) -> str:
    if opts.wrapper_start is not None:
        return opts.wrapper_start
    return '<div class="toc">' + opts.template.level_start


def _wrapper_end(opts: TocOptions) -> str:
    if opts.wrapper_end is not None:
        return opts.wrapper_end
    return opts.template.level_end + "</div>"


def _escape_heading(heading: Heading) -> Heading:
    return heading.model_copy(
        update={"id": escape(heading.id, quote=True), "title": escape(heading.title, quote=True)}
    )
