"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from livematch.api.dependencies import create_live_feed
from livematch.api.routes import health, live
from livematch.config import VERSION
from livematch.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    setup_logging()
    logger.info("Starting livematch %s...", VERSION)

    if getattr(app.state, "live_feed", None) is None:
        app.state.live_feed = create_live_feed()
    logger.info("Live feed initialized")

    yield

    app.state.live_feed.close()
    logger.info("livematch stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="livematch API",
        description="Live football fixtures with matched scores and streams",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(live.router, prefix="/api", tags=["Live"])

    return app


app = create_app()
