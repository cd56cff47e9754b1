"""Stream resolution for live fixtures.

Each fixture lists the broadcast rooms carrying it. Every room is looked
up independently; a room that fails or has no stream contributes nothing
and never affects its siblings.
"""

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed

from livematch.core import StreamLink, StreamTier
from livematch.providers.vnres.client import VnresClient

logger = logging.getLogger(__name__)

# Room detail field -> tier it provides
STREAM_FIELDS: tuple[tuple[str, StreamTier], ...] = (
    ("m3u8", StreamTier.SD),
    ("hdM3u8", StreamTier.HD),
)


def parse_room_streams(detail: dict | None) -> list[StreamLink]:
    """Extract the stream links from a decoded room detail envelope."""
    if not detail:
        return []
    try:
        stream = detail["data"]["stream"]
    except (KeyError, TypeError):
        return []
    if not isinstance(stream, dict):
        return []

    links: list[StreamLink] = []
    for field_name, tier in STREAM_FIELDS:
        url = stream.get(field_name)
        if isinstance(url, str) and url:
            links.append(StreamLink(tier=tier, url=url))
    return links


class StreamResolver:
    """Resolves room ids to playable stream links."""

    MAX_WORKERS = 8

    def __init__(self, client: VnresClient | None = None, max_workers: int = MAX_WORKERS):
        self._client = client or VnresClient()
        self._max_workers = max(1, max_workers)

    def _room_streams(self, room_id: int) -> list[StreamLink]:
        return parse_room_streams(self._client.get_room_detail(room_id))

    def resolve_streams(self, room_ids: Iterable[int] | None) -> list[StreamLink]:
        """Fetch every room concurrently and collect their streams.

        All lookups run to completion (successes and failures alike) before
        results are combined; nothing short-circuits on the first failure.

        Args:
            room_ids: Broadcast room numbers for one fixture

        Returns:
            Stream links in room order, 480p before 1080p within a room
        """
        rooms = list(dict.fromkeys(room_ids or []))
        if not rooms:
            return []

        per_room: dict[int, list[StreamLink]] = {}
        workers = min(self._max_workers, len(rooms))

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(self._room_streams, room): room for room in rooms}

            for future in as_completed(futures):
                room = futures[future]
                try:
                    per_room[room] = future.result()
                except Exception as e:
                    logger.warning("[STREAMS] Room %s lookup failed: %s", room, e)
                    per_room[room] = []

        links: list[StreamLink] = []
        for room in rooms:
            links.extend(per_room.get(room, []))
        return links

    def close(self) -> None:
        self._client.close()
