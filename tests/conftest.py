"""Shared fixtures for livematch tests."""

import threading
from collections.abc import Callable
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import httpx
import pytest

from livematch.core import ResultRow, ScheduleEntry, StreamLink

FEED_TZ = ZoneInfo("Asia/Yangon")

# 2025-01-01 12:00 UTC == 18:30 in Asia/Yangon
NOW = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
NOW_TS = int(NOW.timestamp())


class FakeClock:
    """Manually advanced clock for cache tests."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingTransport:
    """Wraps a request handler in httpx.MockTransport and records requested paths."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self._handler = handler
        self._lock = threading.Lock()
        self.paths: list[str] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.paths.append(request.url.path)
        return self._handler(request)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=self.transport)


class FakeSource:
    closed = False

    def close(self):
        self.closed = True


class FakeResultsSource(FakeSource):
    def __init__(self, rows: list[ResultRow] | None):
        self.rows = rows
        self.calls = 0

    def fetch_results(self):
        self.calls += 1
        return self.rows


class FakeScheduleSource(FakeSource):
    def __init__(self, by_date: dict[str, list[ScheduleEntry] | None]):
        self.by_date = by_date
        self.calls: list[str] = []

    def fetch_schedule(self, date_key: str):
        self.calls.append(date_key)
        return self.by_date.get(date_key, [])


class FakeStreamSource(FakeSource):
    def __init__(self, links: dict[int, list[StreamLink]] | None = None):
        self.links = links or {}
        self.calls: list[tuple[int, ...]] = []

    def resolve_streams(self, room_ids):
        rooms = tuple(room_ids or ())
        self.calls.append(rooms)
        out: list[StreamLink] = []
        for room in rooms:
            out.extend(self.links.get(room, []))
        return out


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    """Factory: recording_transport(handler) -> RecordingTransport."""
    return RecordingTransport


@pytest.fixture
def results_html() -> str:
    return """
    <html><body>
    <table id="other">
      <tr class="Normal"><td></td><td>Decoy FC</td><td>9 - 9</td><td>Decoy United</td><td></td></tr>
    </table>
    <table id="g1" class="results">
      <tr class="Event"><td colspan="5">English Premier League</td></tr>
      <tr class="Normal"><td>90'</td><td>Man Utd</td><td>2 - 1</td><td>Chelsea</td><td>1 - 0</td></tr>
      <tr class="Normal"><td>FT</td><td><b>Arsenal</b></td><td>-</td><td>Spurs</td><td></td></tr>
      <tr class="Normal"><td></td><td></td><td>0 - 0</td><td>Nobody</td><td></td></tr>
      <tr><td>advertisement</td></tr>
      <tr><td class="Event">UEFA CL</td></tr>
      <tr class="normal"><td></td><td>Real Madrid</td><td>3 - 1</td><td>Liverpool</td><td>1 - 1</td></tr>
    </table>
    </body></html>
    """
