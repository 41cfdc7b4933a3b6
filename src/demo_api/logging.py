"""Logging configuration for the demo API.

loguru is the only logger. Records from the standard ``logging`` module
(uvicorn, httpx) are forwarded to it by ``InterceptHandler``.
"""

import logging
import sys

from loguru import logger

# Loggers that follow the application's log level
FOLLOWED_LOGGERS = ("httpcore", "httpx", "asyncio", "uvicorn", "demo_api")

# uvicorn installs its own handlers before the app is imported
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def stdlib_level(log_level: str) -> int:
    """Return the numeric level stdlib ``logging`` should use for a loguru level.

    Levels that exist only in loguru, such as ``TRACE``, map to their loguru
    severity number, which stdlib accepts as a plain integer.

    Args:
        log_level: Loguru level name (case-insensitive)

    Returns:
        The level number
    """
    return logger.level(log_level.upper()).no


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Named levels map by name; custom numeric ones by number
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip the logging module's own frames to report the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).bind(stdlib_logger=record.name).log(level, record.getMessage())


def setup_logging(log_level: str):
    """Configure loguru logging for the entire application.

    Args:
        log_level: Log level to use (from settings, which handles env vars and CLI args).
    """
    log_level = log_level.upper()
    level_no = stdlib_level(log_level)

    # Let stdlib records at loguru-only levels carry loguru's name
    logging.addLevelName(stdlib_level("TRACE"), "TRACE")

    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        level=log_level,
        colorize=True,
    )

    logger.info(f"Log level set to: {log_level}")

    # Redirect all standard logging to loguru
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for name in UVICORN_LOGGERS:
        logging_logger = logging.getLogger(name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False

    # One setting controls the app and its third-party libraries alike
    for name in FOLLOWED_LOGGERS:
        logging.getLogger(name).setLevel(level_no)
