"""
Errors raised while obtaining the raw JSON document.
"""


class SourceError(Exception):
    """Base class for document-level source failures."""


class SourceFetchError(SourceError):
    """Raised when the document cannot be retrieved (I/O or HTTP failure)."""


class SourceFormatError(SourceError):
    """Raised when the document is not a JSON array."""
