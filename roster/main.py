"""Roster API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RosterError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - One RecordStore per app, created in the lifespan and stored on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Store lives on app.state, not in a module global: tests swap it via
      dependency_overrides without touching the running app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster.api.error_handlers import register_error_handlers
from roster.api.routes import health, records
from roster.config import get_settings
from roster.core.record_store import RecordStore
from roster.infrastructure.observability import setup_logging
from roster.services.seed_records import seed_sample_records

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = RecordStore()
    if settings.seed_sample_data:
        seed_sample_records(store)
    app.state.record_store = store
    logger.info("Roster API started")
    yield
    logger.info(
        f"Roster API shutting down, discarding {store.count()} record(s)",
    )


settings = get_settings()
app = FastAPI(title=settings.app_name, version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(records.router)

register_error_handlers(app)
