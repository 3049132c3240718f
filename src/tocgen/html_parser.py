"""Extract headings from HTML and give them anchor ids."""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import Iterable

from tocgen.config import TOCGEN_HTML_PARSER
from tocgen.exceptions import ParseError
from tocgen.schemas import Heading

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

_FULL_DOCUMENT_RE = re.compile(r"<html[\s>]", re.IGNORECASE)
_DEFAULT_SLUG = "section"
# Writes &nbsp; and friends back as entities and keeps void tags as <br>.
_FORMATTER = "html5"


@dataclass
class ParsedHeadings:
    """HTML with anchor ids on every heading, plus the headings themselves."""

    html: str
    headings: list[Heading]


def parse_headings(
    html: str,
    *,
    min_level: int = 1,
    max_level: int = 6,
    parser: str = TOCGEN_HTML_PARSER,
) -> ParsedHeadings:
    """Find ``h<min_level>`` to ``h<max_level>`` headings in document order.

    Headings without an ``id`` get one derived from their title, made unique
    against every id already present in the document. Levels are rebased so
    that ``h<min_level>`` becomes level 1. Headings inside ``<nav>`` and
    headings without text are skipped.

    Args:
        html: An HTML document or fragment.
        min_level: Smallest heading tag number to collect.
        max_level: Largest heading tag number to collect.
        parser: BeautifulSoup tree builder name.

    Raises:
        ParseError: If the level range is not within 1..6.
    """
    if not 1 <= min_level <= max_level <= 6:
        raise ParseError(
            f"Invalid heading range h{min_level}..h{max_level}; expected 1 <= min <= max <= 6"
        )

    soup = BeautifulSoup(html, parser)
    used_ids = {tag["id"] for tag in soup.find_all(id=True)}
    heading_re = re.compile(rf"^h[{min_level}-{max_level}]$")

    headings: list[Heading] = []
    for tag in _iter_headings(_find_document_root(soup), heading_re):
        title = _normalize_text(tag.get_text(" ", strip=True))
        if not title:
            continue

        anchor = tag.get("id")
        if not anchor:
            anchor = _unique_id(slugify(title), used_ids)
            tag["id"] = anchor
            logger.debug("Assigned id %r to heading %r", anchor, title)

        level = int(tag.name[1]) - min_level + 1
        headings.append(Heading(id=anchor, title=title, level=level))

    logger.debug("Extracted %d headings", len(headings))
    return ParsedHeadings(html=_serialize(soup, html), headings=headings)


def slugify(text: str) -> str:
    """Turn heading text into an anchor id."""
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = text.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def _find_document_root(soup: BeautifulSoup) -> Tag | BeautifulSoup:
    if soup.body:
        return soup.body
    return soup


def _iter_headings(root: Tag | BeautifulSoup, heading_re: re.Pattern[str]) -> Iterable[Tag]:
    for heading in root.find_all(heading_re):
        if heading.find_parent("nav"):
            continue
        yield heading


def _unique_id(base: str, used_ids: set[str]) -> str:
    base = base or _DEFAULT_SLUG
    candidate = base
    suffix = 2
    while candidate in used_ids:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used_ids.add(candidate)
    return candidate


def _serialize(soup: BeautifulSoup, original: str) -> str:
    # Parsers such as lxml wrap fragments in <html><body>; hand fragments back as fragments.
    if not _FULL_DOCUMENT_RE.search(original) and soup.body is not None:
        return soup.body.decode_contents(formatter=_FORMATTER)
    return soup.decode(formatter=_FORMATTER)


def _normalize_text(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()
