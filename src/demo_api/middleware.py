"""Error-translation middleware.

Converts any failure coming out of the rest of the pipeline into an HTTP
response, so clients never see a server error for it.
"""

from fastapi import Request
from fastapi.responses import PlainTextResponse
from loguru import logger

from demo_api.constants import FAILURE_STATUS_CODE
from demo_api.pipeline import Endpoint
from demo_api.result import Err, Failure, Ok


def translate_errors(next_endpoint: Endpoint) -> Endpoint:
    """Wrap ``next_endpoint`` so failures become 400 plain-text responses.

    A successful result passes through unchanged. An ``Err`` returned by the
    wrapped endpoint, or any exception it raises, is answered with status 400
    and the failure message as the body.

    Args:
        next_endpoint: The rest of the pipeline

    Returns:
        The wrapping endpoint
    """

    async def error_translating_endpoint(request: Request):
        try:
            result = await next_endpoint(request)
        except Exception as e:
            logger.debug(f"Exception raised while handling {request.url.path}: {e!r}")
            result = Err(Failure.from_exception(e))

        match result:
            case Err(Failure(message=message)):
                logger.debug(f"Translating failure on {request.url.path} into {FAILURE_STATUS_CODE} response")
                return Ok(PlainTextResponse(message, status_code=FAILURE_STATUS_CODE))
            case Err(error):
                return Ok(PlainTextResponse(str(error), status_code=FAILURE_STATUS_CODE))
            case _:
                return result

    return error_translating_endpoint
