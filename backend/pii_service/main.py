"""PII Service API — FastAPI application for running the gateway function locally.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every request goes through services.dispatch, same as the deployed function
    - Global error handler maps unexpected exceptions → INTERNAL_ERROR envelope

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - No CORS, auth or rate limiting: those belong to the gateway in front of the function
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from pii_service.api.error_handlers import register_error_handlers
from pii_service.api.routes import gateway_proxy
from pii_service.config import get_settings
from pii_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.service_name} started")
    yield
    logger.info(f"{settings.service_name} shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    docs_url = "/docs" if settings.docs_enabled else None
    application = FastAPI(
        title="PII Service API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=docs_url,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
    )
    register_error_handlers(application)
    application.include_router(gateway_proxy.router)
    return application


app = create_app()
