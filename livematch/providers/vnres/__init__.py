"""Live schedule feed provider (JSONP) and room stream resolver."""

from livematch.providers.vnres.client import VnresClient
from livematch.providers.vnres.provider import VnresProvider, parse_schedule_entry
from livematch.providers.vnres.streams import StreamResolver, parse_room_streams

__all__ = [
    "StreamResolver",
    "VnresClient",
    "VnresProvider",
    "parse_room_streams",
    "parse_schedule_entry",
]
