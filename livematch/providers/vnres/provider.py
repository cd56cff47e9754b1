"""Schedule source adapter.

Maps the raw schedule feed into ScheduleEntry objects. Status is not
decided here - it depends on the clock at request time (see
utilities/match_status.py).
"""

import logging

from livematch.core import ScheduleEntry
from livematch.providers.vnres.client import VnresClient

logger = logging.getLogger(__name__)

# Envelope code for a successful response
SUCCESS_CODE = 200


def _optional_int(value) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _room_ids(anchors) -> tuple[int, ...]:
    """Collect anchors[].anchor.roomNum, skipping malformed anchors."""
    rooms: list[int] = []
    for item in anchors or []:
        try:
            room = item["anchor"]["roomNum"]
        except (KeyError, TypeError):
            continue
        room_id = _optional_int(room)
        if room_id is not None and room_id not in rooms:
            rooms.append(room_id)
    return tuple(rooms)


def parse_schedule_entry(raw: dict) -> ScheduleEntry:
    """Convert one raw feed entry into a ScheduleEntry.

    Raises:
        KeyError, TypeError, ValueError: if matchTime is missing or invalid
    """
    return ScheduleEntry(
        kickoff=int(raw["matchTime"]) // 1000,
        league=raw.get("subCateName") or "",
        home_name=raw.get("hostName") or "",
        home_logo=raw.get("hostIcon") or "",
        away_name=raw.get("guestName") or "",
        away_logo=raw.get("guestIcon") or "",
        live_home_score=_optional_int(raw.get("homeScore")),
        live_away_score=_optional_int(raw.get("awayScore")),
        room_ids=_room_ids(raw.get("anchors")),
    )


class VnresProvider:
    """Structured fixture list from the live schedule feed."""

    name = "vnres"

    def __init__(self, client: VnresClient | None = None):
        self._client = client or VnresClient()

    def fetch_schedule(self, date_key: str) -> list[ScheduleEntry] | None:
        """Fetch all fixtures for one feed day.

        Args:
            date_key: Date in YYYYMMDD format (feed timezone)

        Returns:
            Schedule entries in feed order, or None when the feed is
            unavailable, malformed or reports a non-success code
        """
        envelope = self._client.get_matches(date_key)
        if envelope is None:
            return None

        code = envelope.get("code")
        if code != SUCCESS_CODE:
            logger.warning("[VNRES] Schedule %s returned code %s", date_key, code)
            return None

        raw_entries = envelope.get("data")
        if not isinstance(raw_entries, list):
            logger.warning("[VNRES] Schedule %s has no data list", date_key)
            return None

        entries: list[ScheduleEntry] = []
        for raw in raw_entries:
            try:
                entries.append(parse_schedule_entry(raw))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("[VNRES] Skipping malformed fixture in %s: %s", date_key, e)

        logger.info("[VNRES] Fetched %d fixtures for %s", len(entries), date_key)
        return entries

    def close(self) -> None:
        self._client.close()
