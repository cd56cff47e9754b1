"""Health check endpoint."""

from fastapi import APIRouter, Depends

from livematch.api.dependencies import get_live_feed
from livematch.api.models import HealthResponse
from livematch.config import VERSION
from livematch.consumers import LiveFeed

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(feed: LiveFeed = Depends(get_live_feed)) -> HealthResponse:
    """Health check endpoint with cache statistics."""
    return HealthResponse(
        status="healthy",
        version=VERSION,
        caches={
            "results": feed.results_cache.stats(),
            "schedule": feed.schedule_cache.stats(),
        },
    )
