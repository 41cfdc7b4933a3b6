"""Ping API endpoint."""

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse
from loguru import logger

from demo_api.api.dependencies import resolve_service
from demo_api.pipeline import Pipeline
from demo_api.result import Err, Failure, Ok, Result
from demo_api.services.ping_service import PingService


class PingController:
    """Request handler for ``GET /ping``."""

    def __init__(self, ping_service: PingService):
        self._ping_service = ping_service

    def handle_ping_request(self) -> Result[Response, Failure]:
        """Answer a ping with the service's reply.

        A failure from the service is returned as is for the pipeline to
        translate.

        Returns:
            ``Ok`` with a 200 plain-text response, or the service's ``Err``
        """
        match self._ping_service.ping():
            case Ok(reply):
                return Ok(PlainTextResponse(reply))
            case Err() as err:
                return err


async def ping(request: Request) -> Result[Response, Failure]:
    """Simple ping endpoint that returns ``Pong!`` as plain text."""
    logger.debug("Ping requested")
    controller = PingController(resolve_service(request, PingService))
    return controller.handle_ping_request()


def create_ping_router(pipeline: Pipeline) -> APIRouter:
    """Create the router serving ``GET /ping`` through ``pipeline``.

    Args:
        pipeline: Middleware chain wrapped around the endpoint

    Returns:
        Router with the ping route mounted
    """
    router = APIRouter(tags=["System"])
    router.add_api_route(
        "/ping",
        pipeline.wrap(ping),
        methods=["GET"],
        response_class=PlainTextResponse,
        response_model=None,
    )
    return router
