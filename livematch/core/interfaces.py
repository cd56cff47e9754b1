"""Interfaces between the live feed and its data sources.

The live feed depends on these protocols, not on concrete providers.
Implementations can be HTTP-backed or faked for testing.
"""

from collections.abc import Iterable
from typing import Protocol

from livematch.core.types import ResultRow, ScheduleEntry, StreamLink


class ResultsSource(Protocol):
    """Protocol for the scraped results source."""

    def fetch_results(self) -> list[ResultRow] | None:
        """Current result rows, or None when the source had nothing usable."""
        ...

    def close(self) -> None:
        """Release any connections held by the source."""
        ...


class ScheduleSource(Protocol):
    """Protocol for the per-day fixture source."""

    def fetch_schedule(self, date_key: str) -> list[ScheduleEntry] | None:
        """Fixtures for a YYYYMMDD feed day, or None when unavailable."""
        ...

    def close(self) -> None: ...


class StreamSource(Protocol):
    """Protocol for resolving broadcast rooms to stream links."""

    def resolve_streams(self, room_ids: Iterable[int] | None) -> list[StreamLink]:
        """Stream links for a fixture's rooms. Never raises for room failures."""
        ...

    def close(self) -> None: ...
