"""Provider layer - upstream data sources.

This is the SINGLE place where providers are built from configuration.
All other code receives provider instances via dependency injection.

Sources:
- ibet:  scraped results page (full-time / half-time scores)
- vnres: structured live schedule feed + per-room stream details

Every source makes a single attempt per request, so a fetch is bounded by its
configured timeout; a failed fetch is covered by the stale cache instead.
"""

from livematch.config import Config
from livematch.providers.ibet import IbetClient, IbetProvider
from livematch.providers.vnres import StreamResolver, VnresClient, VnresProvider

# =============================================================================
# PROVIDER FACTORY FUNCTIONS
# =============================================================================


def create_results_provider() -> IbetProvider:
    """Factory for the results provider, configured from Config."""
    return IbetProvider(
        client=IbetClient(
            url=Config.RESULTS_URL,
            timeout=Config.RESULTS_TIMEOUT,
            retry_count=1,
        ),
    )


def create_schedule_provider() -> VnresProvider:
    """Factory for the schedule provider, configured from Config."""
    return VnresProvider(
        client=VnresClient(
            base_url=Config.SCHEDULE_BASE_URL,
            referer=Config.SCHEDULE_REFERER,
            timeout=Config.SCHEDULE_TIMEOUT,
            retry_count=1,
        ),
    )


def create_stream_resolver() -> StreamResolver:
    """Factory for the room stream resolver, configured from Config."""
    return StreamResolver(
        client=VnresClient(
            base_url=Config.SCHEDULE_BASE_URL,
            referer=Config.SCHEDULE_REFERER,
            timeout=Config.ROOM_TIMEOUT,
            retry_count=1,
        ),
        max_workers=Config.MAX_WORKERS,
    )


__all__ = [
    "IbetClient",
    "IbetProvider",
    "StreamResolver",
    "VnresClient",
    "VnresProvider",
    "create_results_provider",
    "create_schedule_provider",
    "create_stream_resolver",
]
