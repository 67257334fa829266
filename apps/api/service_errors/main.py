"""FastAPI application entrypoint."""

from __future__ import annotations

from fastapi import FastAPI

from service_errors.core.config import Settings, get_settings
from service_errors.core.logging_config import configure_logging
from service_errors.handlers import register_error_handlers
from service_errors.services.dispatcher import ErrorDispatcher


def create_app(settings: Settings | None = None, dispatcher: ErrorDispatcher | None = None) -> FastAPI:
    """Build an application whose failures all go through the error boundary.

    Routers are added by the hosting service.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Service Errors", version="1.0.0")
    register_error_handlers(app, dispatcher)
    return app
