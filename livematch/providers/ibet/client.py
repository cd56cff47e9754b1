"""Results page HTTP client.

Fetches the scraped results page (HTML) through its proxy URL.
"""

import logging

import httpx

from livematch.providers.http import BaseHTTPClient

logger = logging.getLogger(__name__)

IBET_RESULTS_URL = "https://proxy-ibet.aunghein-mm.workers.dev"


class IbetClient(BaseHTTPClient):
    """Low-level results page client."""

    name = "IBET"

    def __init__(
        self,
        url: str = IBET_RESULTS_URL,
        timeout: float = 10.0,
        retry_count: int = 2,
        retry_delay: float = 0.5,
        client: httpx.Client | None = None,
    ):
        super().__init__(
            timeout=timeout,
            retry_count=retry_count,
            retry_delay=retry_delay,
            client=client,
        )
        self._url = url

    def get_results_page(self) -> str | None:
        """Fetch the results page HTML.

        Returns:
            Page HTML or None on error
        """
        return self._get_text(self._url)
