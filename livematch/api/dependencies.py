"""FastAPI dependencies: LiveFeed construction and lookup.

The LiveFeed is built once at startup (see app.py lifespan) and stored on
app.state, so its caches live as long as the process.
"""

from fastapi import Request

from livematch.config import Config
from livematch.consumers import LiveFeed, LiveFeedOptions
from livematch.providers import (
    create_results_provider,
    create_schedule_provider,
    create_stream_resolver,
)
from livematch.utilities.cache import StaleCache


def create_live_feed() -> LiveFeed:
    """Build a LiveFeed wired to the configured upstream sources."""
    return LiveFeed(
        results_source=create_results_provider(),
        schedule_source=create_schedule_provider(),
        stream_source=create_stream_resolver(),
        results_cache=StaleCache(Config.RESULTS_CACHE_TTL, name="results"),
        schedule_cache=StaleCache(Config.SCHEDULE_CACHE_TTL, name="schedule"),
        options=LiveFeedOptions(
            lookahead_hours=Config.LOOKAHEAD_HOURS,
            match_threshold=Config.MATCH_THRESHOLD,
            team_cutoff=Config.TEAM_FUZZY_CUTOFF,
            max_workers=Config.MAX_WORKERS,
            timezone=Config.get_feed_timezone(),
        ),
    )


def get_live_feed(request: Request) -> LiveFeed:
    """Return the app's LiveFeed, building it on first use if startup didn't."""
    feed = getattr(request.app.state, "live_feed", None)
    if feed is None:
        feed = create_live_feed()
        request.app.state.live_feed = feed
    return feed
