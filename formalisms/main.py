"""Formalisms API — FastAPI application entry point for cross-language harnesses.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FormalismsError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Error handlers live in api/error_handlers.py (domain, validation, catch-all)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from formalisms import __version__
from formalisms.api.error_handlers import register_error_handlers
from formalisms.api.routes import conformance, health, operations
from formalisms.config import get_settings
from formalisms.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Formalisms API started")
    yield
    logger.info("Formalisms API shutting down")


app = FastAPI(
    title="Polyglot Formalisms API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(operations.router)
app.include_router(conformance.router)

register_error_handlers(app)
