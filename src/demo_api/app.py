"""Main FastAPI application module."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from demo_api import __version__
from demo_api.api.ping import create_ping_router
from demo_api.logging import setup_logging
from demo_api.middleware import translate_errors
from demo_api.pipeline import Pipeline
from demo_api.services.di import register_all_services
from demo_api.services.registry import ServiceRegistry
from demo_api.settings import Settings, get_settings


def _log_server_endpoints_summary(settings: Settings) -> None:
    """Log the server URL and the available endpoints.

    Args:
        settings: Application settings containing host and port
    """
    server_url = f"http://{settings.host}:{settings.port}"
    logger.info(f"Server running at: {server_url}")
    logger.info("Available endpoints:")
    logger.info(f"   Ping: {server_url}/ping")
    logger.info(f"Ping service scope: {settings.ping_service_scope.value}")


@asynccontextmanager
async def app_lifespan(_app: FastAPI):
    """Handle startup and shutdown events for the application."""
    settings: Settings = _app.state.settings

    setup_logging(log_level=settings.log_level)
    logger.info("Demo API starting up")
    _log_server_endpoints_summary(settings)

    yield

    logger.info("Demo API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Each application owns its service registry, reachable as
    ``app.state.registry``; tests use it to reach the ping service.

    Args:
        settings: Settings to use; defaults to the cached process settings

    Returns:
        The configured FastAPI application
    """
    settings = settings or get_settings()

    fastapi_app = FastAPI(
        lifespan=app_lifespan,
        title="Demo API",
        description="Demonstration service with a single ping endpoint and error-translation middleware",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.state.settings = settings

    logger.debug("Registering services in the service registry")
    registry = ServiceRegistry()
    register_all_services(registry, settings)
    fastapi_app.state.registry = registry

    # Every route below is served through this chain
    pipeline = Pipeline([translate_errors])
    fastapi_app.include_router(create_ping_router(pipeline))

    return fastapi_app


app = create_app()
