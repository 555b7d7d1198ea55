"""PharmaDB API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PharmaError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module's import fan-out small
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pharmadb.api.error_handlers import register_error_handlers
from pharmadb.api.routes import catalog, health, people, prescriptions, reports, suppliers
from pharmadb.config import get_settings
from pharmadb.infrastructure.database import init_db
from pharmadb.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        isolation_level=settings.database_isolation_level,
    )
    logger.info("PharmaDB API started")
    yield
    await manager.dispose()
    logger.info("PharmaDB API shutting down")


settings = get_settings()

app = FastAPI(
    title="PharmaDB API", version=settings.service_version, lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(people.router)
app.include_router(suppliers.router)
app.include_router(catalog.router)
app.include_router(prescriptions.router)
app.include_router(reports.router)

register_error_handlers(app)
