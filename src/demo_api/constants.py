"""Global constants for the demo API.

This module defines constants used throughout the application to avoid
hardcoded strings and make the codebase more maintainable.
"""

from enum import Enum

# Reply returned by a healthy ping
PING_REPLY = "Pong!"

# Status code every translated failure is reported with
FAILURE_STATUS_CODE = 400


class ServiceScope(str, Enum):
    """Lifetime of a registered service instance."""

    SINGLETON = "singleton"
    REQUEST = "request"
