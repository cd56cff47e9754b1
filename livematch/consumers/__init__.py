"""Consumer layer - builds the served live feed from provider data."""

from livematch.consumers.live_feed import LiveFeed, LiveFeedOptions

__all__ = ["LiveFeed", "LiveFeedOptions"]
