"""
HTTP fetcher for the raw JSON document.
"""

import requests

from calorie_insights.core.config import SourceSettings
from calorie_insights.observability.logger import get_logger
from calorie_insights.observability.metrics import increment_counter, source_fetch_total

from .errors import SourceFetchError
from .json_reader import parse_document

logger = get_logger(__name__)


class HttpFetcher:
    """
    Downloads the JSON document over HTTP.

    One GET per call, no retries.
    """

    def __init__(self, url: str, timeout_seconds: float = 30.0, session: requests.Session | None = None):
        """
        Initialize fetcher.

        Args:
            url: Document URL
            timeout_seconds: Request timeout
            session: Optional requests session (a new one is used when None)
        """
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: SourceSettings) -> "HttpFetcher":
        return cls(settings.url, settings.timeout_seconds)

    def fetch_text(self) -> str:
        """
        Download the document body.

        Raises:
            SourceFetchError: On connection errors, timeouts or non-2xx status
        """
        logger.info(f"Downloading JSON from {self.url}", extra={"url": self.url})
        try:
            response = self.session.get(self.url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as e:
            increment_counter(source_fetch_total, kind="http", status="failure")
            raise SourceFetchError(f"HTTP error downloading JSON: {e}") from e

        increment_counter(source_fetch_total, kind="http", status="success")
        return response.text

    def fetch_document(self) -> list:
        """Download and parse the document as a JSON array."""
        return parse_document(self.fetch_text())
