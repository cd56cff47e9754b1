"""Live schedule feed HTTP client.

Handles raw HTTP requests to the schedule and room-detail endpoints.
Both answer with JSONP; this client strips the envelope and returns the
decoded JSON. No data transformation beyond that.

Endpoints:
    {base}/match/matches_{YYYYMMDD}.json   -> matches_<date>({code, data: [...]})
    {base}/room/{roomNum}/detail.json      -> detail({data: {stream: {...}}})
"""

import logging

import httpx

from livematch.providers.http import BaseHTTPClient
from livematch.utilities.jsonp import decode_jsonp

logger = logging.getLogger(__name__)

VNRES_BASE_URL = "https://json.vnres.co"
VNRES_REFERER = "https://socolivev.co/"


class VnresClient(BaseHTTPClient):
    """Low-level schedule feed client."""

    name = "VNRES"

    def __init__(
        self,
        base_url: str = VNRES_BASE_URL,
        referer: str = VNRES_REFERER,
        timeout: float = 15.0,
        retry_count: int = 2,
        retry_delay: float = 0.5,
        client: httpx.Client | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        super().__init__(
            timeout=timeout,
            retry_count=retry_count,
            retry_delay=retry_delay,
            headers={"referer": referer, "origin": self._base_url},
            client=client,
        )

    def get_matches(self, date_key: str) -> dict | None:
        """Fetch the fixture list for one feed day.

        Args:
            date_key: Date in YYYYMMDD format (feed timezone)

        Returns:
            Decoded envelope ({code, data}) or None on error
        """
        body = self._get_text(f"{self._base_url}/match/matches_{date_key}.json")
        payload = decode_jsonp(body, r"matches_\d+")
        if body is not None and payload is None:
            logger.warning("[VNRES] Unparseable schedule response for %s", date_key)
        return payload if isinstance(payload, dict) else None

    def get_room_detail(self, room_id: int) -> dict | None:
        """Fetch the stream detail for one broadcast room.

        Returns:
            Decoded envelope or None on error
        """
        body = self._get_text(f"{self._base_url}/room/{room_id}/detail.json")
        payload = decode_jsonp(body, "detail")
        return payload if isinstance(payload, dict) else None
