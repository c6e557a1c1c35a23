"""Service Template API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers render every failure as an error envelope
    - Swagger UI served at settings.docs_url, OpenAPI JSON at settings.openapi_url
    - Logging configured on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from service_template.api.error_handlers import register_error_handlers
from service_template.api.routes import health
from service_template.config import Settings, get_settings
from service_template.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.app_name} {settings.app_version} started")
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application from settings."""
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=settings.app_description,
        terms_of_service=settings.terms_of_service,
        contact={
            "name": settings.contact_name,
            "url": settings.contact_url,
            "email": settings.contact_email,
        },
        license_info={
            "name": settings.license_name,
            "url": settings.license_url,
        },
        docs_url=settings.docs_url,
        openapi_url=settings.openapi_url,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.include_router(health.router)
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host/port."""
    settings = get_settings()
    uvicorn.run(
        "service_template.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
