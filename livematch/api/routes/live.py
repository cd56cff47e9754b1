"""Live feed endpoint.

GET /api/live returns every fixture for the current and next feed day with
matched scores and, for live fixtures, stream links. Upstream failures show
up as missing scores/streams or shorter lists, never as errors; only an
exception escaping the feed itself turns into a 500.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from livematch.api.dependencies import get_live_feed
from livematch.api.models import ErrorResponse, MatchResponse
from livematch.config import Config
from livematch.consumers import LiveFeed

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/live",
    response_model=list[MatchResponse],
    responses={500: {"model": ErrorResponse}},
)
def get_live_matches(feed: LiveFeed = Depends(get_live_feed)):
    """Get today's and upcoming fixtures with scores and streams."""
    try:
        records = feed.get_matches()
    except Exception as e:
        logger.exception("[LIVE] Live feed failed")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Server error", message=str(e)).model_dump(),
        )

    body = [MatchResponse.from_record(r).model_dump(mode="json") for r in records]
    return JSONResponse(
        content=body,
        headers={
            "Cache-Control": Config.LIVE_CACHE_CONTROL,
            "Access-Control-Allow-Origin": "*",
        },
    )
