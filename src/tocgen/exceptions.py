"""Custom exceptions for tocgen."""


class TocgenError(Exception):
    """Base exception for tocgen operations."""


class TreeStructureError(TocgenError):
    """Heading tree invariant was violated."""


class TemplateError(TocgenError):
    """Error in the ToC template configuration."""


class ParseError(TocgenError):
    """Error during heading extraction."""


class FetchError(TocgenError):
    """Error during document fetching."""
