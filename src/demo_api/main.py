"""Main entry point for the demo API using Typer and Pydantic Settings."""

import typer
import uvicorn
from loguru import logger
from pydantic import ValidationError

from demo_api.constants import ServiceScope
from demo_api.logging import setup_logging
from demo_api.settings import get_settings

app = typer.Typer(
    name="demo-api",
    help="Demo API - ping service with error-translation middleware",
    no_args_is_help=True,
)


HOST_OPTION = typer.Option(
    None,
    help="Host to bind the server to (overrides DEMO_API_HOST)",
    metavar="<server>",
)  # fmt: skip
PORT_OPTION = typer.Option(
    None,
    help="Port to bind the server to (overrides DEMO_API_PORT)",
    metavar="<port>",
)  # fmt: skip
RELOAD_OPTION = typer.Option(
    None,
    help="Enable/disable auto-reload (overrides DEMO_API_RELOAD)",
)  # fmt: skip
LOG_LEVEL_OPTION = typer.Option(
    None,
    help="Log level (overrides DEMO_API_LOG_LEVEL)",
    metavar="<level>",
    case_sensitive=False,
)  # fmt: skip
SCOPE_OPTION = typer.Option(
    None,
    "--scope",
    help="Ping service lifetime (overrides DEMO_API_PING_SERVICE_SCOPE)",
    case_sensitive=False,
)  # fmt: skip


def _update_settings(
    host: str | None,
    port: int | None,
    log_level: str | None,
    reload: bool | None,
    scope: ServiceScope | None,
) -> None:
    """Update settings with CLI overrides.

    Args:
        host: Host override
        port: Port override
        log_level: Log level override
        reload: Reload override
        scope: Ping service scope override
    """
    settings = get_settings()

    if host is not None:
        settings.host = host
    if port is not None:
        settings.port = port
    if log_level is not None:
        settings.log_level = log_level.upper()
    if reload is not None:
        settings.reload = reload
    if scope is not None:
        settings.ping_service_scope = scope


@app.callback()
def main_callback():
    """Demo API command line."""


@app.command()
def run(
    host: str = HOST_OPTION,
    port: int = PORT_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
    reload: bool = RELOAD_OPTION,
    scope: ServiceScope = SCOPE_OPTION,
) -> None:
    """Run the API server."""
    try:
        _update_settings(host, port, log_level, reload, scope)
    except ValidationError as e:
        logger.error(f"Invalid option: {e.errors()[0]['msg']}")
        raise typer.Exit(2) from None

    settings = get_settings()

    setup_logging(settings.log_level)

    logger.info(f"Starting demo API on {settings.host}:{settings.port}")
    logger.info(f"Reload: {settings.reload}")

    # Reload mode needs an import string so the worker can re-import the app
    if settings.reload:
        uvicorn.run(
            "demo_api.app:app",
            host=settings.host,
            port=settings.port,
            reload=True,
            log_level=settings.log_level.lower(),
        )
    else:
        from demo_api.app import create_app

        uvicorn.run(
            create_app(settings),
            host=settings.host,
            port=settings.port,
            reload=False,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    app()
