"""JSON:API Resource service — FastAPI host for the resource error handlers.

Invariants:
    - The only route is the liveness check; resource routes belong to the embedding application
    - Global error handlers map JsonApiResourceError → structured JSON responses
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py and are registered once here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from jsonapi_resource import __version__
from jsonapi_resource.api.error_handlers import register_error_handlers
from jsonapi_resource.api.routes import health
from jsonapi_resource.config import get_settings
from jsonapi_resource.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    handler = setup_logging(settings.log_level, settings.log_format)
    logger.info("JSON:API resource service started")
    yield
    logger.info("JSON:API resource service shutting down")
    logging.root.removeHandler(handler)


def create_app() -> FastAPI:
    app = FastAPI(
        title="JSON:API Resource Service", version=__version__, lifespan=lifespan,
    )
    app.include_router(health.router)
    register_error_handlers(app)
    return app


app = create_app()
