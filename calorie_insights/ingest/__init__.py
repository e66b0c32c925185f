"""
Raw document sources (files and HTTP).
"""

from .errors import SourceError, SourceFetchError, SourceFormatError
from .http_fetcher import HttpFetcher
from .json_reader import parse_document, read_json_file

__all__ = [
    "SourceError",
    "SourceFetchError",
    "SourceFormatError",
    "HttpFetcher",
    "parse_document",
    "read_json_file",
]
