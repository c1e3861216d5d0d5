"""Jukebox API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"error": <string>}
    - Unmatched routes answer 404 "Route <METHOD> <PATH> not found"
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - CORS middleware only when origins are configured: the API is same-origin
      by default
    - Trailing slashes stripped by middleware instead of redirected: "/playlists/"
      answers like "/playlists"
    - run() serves with uvicorn on settings.port (PORT, default 3000)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jukebox.api.error_handlers import register_error_handlers
from jukebox.api.routes import health, playlists, tracks
from jukebox.api.trailing_slash import StripTrailingSlashMiddleware
from jukebox.config import get_settings
from jukebox.infrastructure.database import close_db, init_db
from jukebox.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

ROUTE_SUMMARY = (
    ("GET", "/tracks", "Get all tracks"),
    ("GET", "/tracks/{id}", "Get specific track"),
    ("GET", "/playlists", "Get all playlists"),
    ("POST", "/playlists", "Create new playlist"),
    ("GET", "/playlists/{id}", "Get specific playlist"),
    ("GET", "/playlists/{id}/tracks", "Get tracks in playlist"),
    ("POST", "/playlists/{id}/tracks", "Add track to playlist"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Jukebox API started")
    for method, path, summary in ROUTE_SUMMARY:
        logger.debug(f"{method:<6} {path:<24} {summary}")
    yield
    await close_db()
    logger.info("Jukebox API shutting down")


app = FastAPI(
    title="Jukebox API", version="1.0.0", lifespan=lifespan,
    redirect_slashes=False,
)
app.add_middleware(StripTrailingSlashMiddleware)

settings = get_settings()
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(health.router)
app.include_router(tracks.router)
app.include_router(playlists.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the API on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "jukebox.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
