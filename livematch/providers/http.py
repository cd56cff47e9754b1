"""Shared HTTP plumbing for provider clients.

Handles raw HTTP requests with timeout and retry.
No data transformation - just fetch and return the body text.
Every failure mode ends in None, never an exception.
"""

import logging
import threading
import time

import httpx

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0"


class BaseHTTPClient:
    """Low-level text-fetching client with lazy httpx.Client creation.

    An httpx.Client can be injected (e.g., one built on httpx.MockTransport);
    otherwise one is created on first use with the configured timeout.
    """

    name = "HTTP"

    def __init__(
        self,
        timeout: float = 10.0,
        retry_count: int = 2,
        retry_delay: float = 0.5,
        headers: dict[str, str] | None = None,
        client: httpx.Client | None = None,
    ):
        self._timeout = timeout
        self._retry_count = max(1, retry_count)
        self._retry_delay = retry_delay
        self._headers = {"user-agent": DEFAULT_USER_AGENT, **(headers or {})}
        self._client = client
        self._owns_client = client is None
        self._lock = threading.Lock()

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            with self._lock:
                # Double-check after acquiring lock
                if self._client is None:
                    self._client = httpx.Client(
                        timeout=self._timeout,
                        headers=self._headers,
                        follow_redirects=True,
                        limits=httpx.Limits(max_connections=50, max_keepalive_connections=10),
                    )
        return self._client

    def _get_text(self, url: str, params: dict | None = None) -> str | None:
        """GET a URL and return the body text, with retry logic."""
        for attempt in range(self._retry_count):
            try:
                client = self._get_client()
                response = client.get(
                    url,
                    params=params,
                    headers=self._headers,
                    timeout=self._timeout,
                )
                response.raise_for_status()
                return response.text
            except httpx.HTTPStatusError as e:
                logger.warning("[%s] HTTP %s for %s", self.name, e.response.status_code, url)
            except (httpx.RequestError, RuntimeError, OSError) as e:
                # RuntimeError: "Cannot send a request, as the client has been closed"
                logger.warning("[%s] Request failed for %s: %s", self.name, url, e)

            if attempt < self._retry_count - 1:
                time.sleep(self._retry_delay * (attempt + 1))

        return None

    def close(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        with self._lock:
            if self._client is not None and self._owns_client:
                self._client.close()
                self._client = None
