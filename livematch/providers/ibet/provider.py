"""Results source adapter.

Wraps IbetClient + parse_results_html into one best-effort call.
"""

import logging

from livematch.core import ResultRow
from livematch.providers.ibet.client import IbetClient
from livematch.providers.ibet.parser import parse_results_html

logger = logging.getLogger(__name__)


class IbetProvider:
    """Scraped full-time / half-time results."""

    name = "ibet"

    def __init__(self, client: IbetClient | None = None):
        self._client = client or IbetClient()

    def fetch_results(self) -> list[ResultRow] | None:
        """Fetch and parse the current results page.

        Returns:
            Result rows, or None when the page is unavailable or malformed
            (the caller decides whether to fall back to cached rows)
        """
        html = self._client.get_results_page()
        if html is None:
            logger.warning("[IBET] Results page unavailable")
            return None

        rows = parse_results_html(html)
        if rows is not None:
            logger.info("[IBET] Fetched %d result rows", len(rows))
        return rows

    def close(self) -> None:
        self._client.close()
