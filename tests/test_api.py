"""Tests for the HTTP API (GET /api/live, GET /health)."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from livematch.api.app import create_app
from livematch.config import Config
from livematch.consumers import LiveFeed, LiveFeedOptions
from livematch.core import MatchDebugInfo, MatchRecord, MatchStatus, StreamLink, StreamTier
from livematch.providers.ibet import IbetClient, IbetProvider
from livematch.providers.vnres import StreamResolver, VnresClient, VnresProvider
from tests.conftest import (
    FEED_TZ,
    NOW_TS,
    FakeResultsSource,
    FakeScheduleSource,
    FakeStreamSource,
)


class StubFeed:
    def __init__(self, records=None, error: Exception | None = None):
        self._records = records or []
        self._error = error
        self.closed = False

    def get_matches(self, now=None):
        if self._error:
            raise self._error
        return self._records

    def close(self):
        self.closed = True


def _client(feed) -> TestClient:
    app = create_app()
    app.state.live_feed = feed
    return TestClient(app)


def _record() -> MatchRecord:
    return MatchRecord(
        kickoff=NOW_TS,
        match_time="06:30 PM",
        status=MatchStatus.LIVE,
        league="EPL",
        home_name="Arsenal",
        home_logo="https://img.test/ars.png",
        away_name="Chelsea",
        away_logo="https://img.test/che.png",
        score="3 - 0",
        half_time_score="1 - 0",
        streams=[StreamLink(StreamTier.SD, "u1"), StreamLink(StreamTier.HD, "u2")],
        debug=MatchDebugInfo(
            original_league="EPL",
            original_home="Arsenal",
            original_away="Chelsea",
            results_match="FOUND",
        ),
    )


# =============================================================================
# /api/live
# =============================================================================


class TestLiveEndpoint:
    def test_returns_match_list(self):
        response = _client(StubFeed([_record()])).get("/api/live")

        assert response.status_code == 200
        assert response.json() == [
            {
                "match_time": "06:30 PM",
                "kickoff": NOW_TS,
                "match_status": "live",
                "home_team_name": "Arsenal",
                "home_team_logo": "https://img.test/ars.png",
                "away_team_name": "Chelsea",
                "away_team_logo": "https://img.test/che.png",
                "league_name": "EPL",
                "match_score": "3 - 0",
                "ht_score": "1 - 0",
                "servers": [
                    {"name": "480p", "stream_url": "u1"},
                    {"name": "1080p", "stream_url": "u2"},
                ],
                "debug": {
                    "original_league": "EPL",
                    "original_home": "Arsenal",
                    "original_away": "Chelsea",
                    "ibet_match": "FOUND",
                },
            }
        ]

    def test_cache_and_cors_headers(self):
        response = _client(StubFeed([])).get("/api/live")

        assert response.status_code == 200
        assert response.json() == []
        assert response.headers["cache-control"] == Config.LIVE_CACHE_CONTROL
        assert response.headers["access-control-allow-origin"] == "*"

    def test_missing_scores_serialize_as_null(self):
        record = _record()
        record.score = None
        record.half_time_score = None
        record.streams = []

        body = _client(StubFeed([record])).get("/api/live").json()[0]

        assert body["match_score"] is None
        assert body["ht_score"] is None
        assert body["servers"] == []

    def test_feed_exception_returns_500(self):
        response = _client(StubFeed(error=RuntimeError("boom"))).get("/api/live")

        assert response.status_code == 500
        assert response.json() == {"error": "Server error", "message": "boom"}


# =============================================================================
# /health
# =============================================================================


class TestHealthEndpoint:
    def test_reports_cache_stats(self):
        feed = LiveFeed(
            results_source=FakeResultsSource([]),
            schedule_source=FakeScheduleSource({}),
            stream_source=FakeStreamSource(),
            options=LiveFeedOptions(timezone=FEED_TZ),
        )

        response = _client(feed).get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"]
        assert body["caches"]["results"]["name"] == "results"
        assert body["caches"]["schedule"]["total_entries"] == 0


# =============================================================================
# LIFESPAN
# =============================================================================


class TestLifespan:
    def test_startup_builds_live_feed(self):
        feed = StubFeed([_record()])

        with (
            patch("livematch.api.app.setup_logging") as mock_logging,
            patch("livematch.api.app.create_live_feed", return_value=feed) as mock_create,
        ):
            app = create_app()
            with TestClient(app) as client:
                response = client.get("/api/live")

        mock_logging.assert_called_once()
        mock_create.assert_called_once()
        assert app.state.live_feed is feed
        assert response.json()[0]["home_team_name"] == "Arsenal"

    def test_startup_keeps_existing_feed(self):
        feed = StubFeed([])

        with (
            patch("livematch.api.app.setup_logging"),
            patch("livematch.api.app.create_live_feed") as mock_create,
        ):
            app = create_app()
            app.state.live_feed = feed
            with TestClient(app):
                pass

        mock_create.assert_not_called()
        assert app.state.live_feed is feed

    def test_shutdown_closes_feed(self):
        feed = StubFeed([])

        with patch("livematch.api.app.setup_logging"):
            app = create_app()
            app.state.live_feed = feed
            with TestClient(app):
                assert feed.closed is False

        assert feed.closed is True

    def test_shutdown_closes_upstream_http_clients(self):
        ibet = IbetClient(url="https://results.test")
        schedule = VnresClient(base_url="https://feed.test")
        rooms = VnresClient(base_url="https://feed.test", retry_count=1)
        feed = LiveFeed(
            results_source=IbetProvider(client=ibet),
            schedule_source=VnresProvider(client=schedule),
            stream_source=StreamResolver(client=rooms),
            options=LiveFeedOptions(timezone=FEED_TZ),
        )
        http_clients = [client._get_client() for client in (ibet, schedule, rooms)]

        with (
            patch("livematch.api.app.setup_logging"),
            patch("livematch.api.app.create_live_feed", return_value=feed),
        ):
            with TestClient(create_app()):
                assert [c.is_closed for c in http_clients] == [False, False, False]

        assert [c.is_closed for c in http_clients] == [True, True, True]
