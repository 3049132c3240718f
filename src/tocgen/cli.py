"""Command line entry point: print an HTML document with its ToC inserted."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import httpx

from tocgen.config import TOCGEN_FETCH_TIMEOUT_S, TOCGEN_TOKEN, TOCGEN_USER_AGENT
from tocgen.exceptions import FetchError, TocgenError
from tocgen.toc import TocOptions, build_toc


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tocgen", description="Insert a numbered table of contents into an HTML document."
    )
    parser.add_argument("--url", help="URL to fetch (e.g. https://example.com/page.html)")
    parser.add_argument("--file", help="Local HTML file path")
    parser.add_argument("--token", default=TOCGEN_TOKEN, help="Placeholder replaced by the ToC")
    parser.add_argument("--min-level", type=int, default=1, help="Smallest heading level to include")
    parser.add_argument("--max-level", type=int, default=6, help="Largest heading level to include")
    parser.add_argument("--toc-only", action="store_true", help="Print only the rendered ToC")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    options = TocOptions(
        token=args.token, min_level=args.min_level, max_level=args.max_level
    )
    try:
        html = load_html(url=args.url, file_path=args.file)
        if args.toc_only and args.token not in html:
            # Render the ToC even when the document has no placeholder.
            html = args.token + html
        result = build_toc(html, options=options)
    except (OSError, TocgenError) as exc:
        print(f"tocgen: {exc}", file=sys.stderr)
        return 1

    print(result.toc if args.toc_only else result.html)
    return 0


def load_html(*, url: str | None, file_path: str | None) -> str:
    if url:
        try:
            response = httpx.get(
                url,
                follow_redirects=True,
                timeout=TOCGEN_FETCH_TIMEOUT_S,
                headers={"User-Agent": TOCGEN_USER_AGENT},
            )
            response.raise_for_status()
        except (httpx.RequestError, httpx.HTTPStatusError) as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}") from exc
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"HTML file not found: {path}")
    return path.read_text(encoding="utf-8")


if __name__ == "__main__":
    sys.exit(main())
