"""Local configuration for tocgen."""

from __future__ import annotations

import os


DEFAULT_TOC_TOKEN = "{TOC}"
DEFAULT_HTML_PARSER = "html.parser"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_USER_AGENT = "tocgen/0.1"

# Placeholder in a document that is replaced by the rendered table of contents.
TOCGEN_TOKEN = os.getenv("TOCGEN_TOKEN", DEFAULT_TOC_TOKEN)
TOCGEN_HTML_PARSER = os.getenv("TOCGEN_HTML_PARSER", DEFAULT_HTML_PARSER)
TOCGEN_FETCH_TIMEOUT_S = float(os.getenv("TOCGEN_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
TOCGEN_USER_AGENT = os.getenv("TOCGEN_USER_AGENT", DEFAULT_USER_AGENT)
