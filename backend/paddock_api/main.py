"""Paddock API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PaddockError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py and are registered once here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from paddock_api.api.error_handlers import register_error_handlers
from paddock_api.api.routes import (
    health, paddocks, steps, paddock_steps, paddock_systems,
)
from paddock_api.config import get_settings
from paddock_api.infrastructure.database import init_db
from paddock_api.infrastructure.observability import setup_logging

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
    )
    logger.info("Paddock API started")
    yield
    await manager.dispose()
    logger.info("Paddock API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Paddock API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(paddock_steps.router)
    app.include_router(paddock_systems.router)
    app.include_router(paddocks.router)
    app.include_router(steps.router)

    register_error_handlers(app)
    return app


app = create_app()
