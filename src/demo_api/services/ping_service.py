"""Service answering ping requests."""

from loguru import logger

from demo_api.constants import PING_REPLY
from demo_api.result import Err, Failure, Ok, Result


class PingService:
    """Service that replies to a ping, or fails with a configured message.

    It stands in for a real application service in which a failure can surface
    at any point. Tests switch it into failure mode with ``configure_failure``;
    nothing on the HTTP surface can.
    """

    def __init__(self):
        self._failure_message: str | None = None

    @property
    def failure_message(self) -> str | None:
        """The message the next ping fails with, or None when healthy."""
        return self._failure_message

    def configure_failure(self, message: str) -> None:
        """Make this and every later ping fail with ``message``.

        Args:
            message: Failure message; an empty string is a valid message
        """
        logger.debug(f"Service: configure_failure with message={message!r}")
        self._failure_message = message

    def ping(self) -> Result[str, Failure]:
        """Reply to a ping.

        Returns:
            ``Ok("Pong!")``, or ``Err`` carrying the configured failure message
        """
        if self._failure_message is not None:
            return Err(Failure(message=self._failure_message))
        return Ok(PING_REPLY)


def new_ping_service() -> PingService:
    """Factory building a fresh, healthy ping service."""
    return PingService()
