"""Participation API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ParticipationError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Startup never fails on an unreachable database: the connection is probed
      in a background task that retries with a fixed delay until it succeeds

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module small
"""

import asyncio
import contextlib
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

import app.infrastructure.database as database
from app.api.error_handlers import register_error_handlers
from app.api.routes import graphql_endpoint, health
from app.infrastructure.observability import RequestLoggingMiddleware, setup_logging
from app.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    connector = asyncio.create_task(
        database.db_manager.connect_with_retry(
            settings.database_retry_delay_seconds,
        ),
    )
    logger.info(f"Participation API started on port {settings.port} (/graphql)")
    yield
    connector.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await connector
    await database.db_manager.dispose()
    logger.info("Participation API shutting down")


app = FastAPI(
    title="Participation API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router)
app.include_router(graphql_endpoint.router, prefix="/graphql")

register_error_handlers(app)

# Static files — serves the built frontend when present
# Mounted AFTER API routes so /graphql and /health take precedence
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
