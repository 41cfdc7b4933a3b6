"""Common exceptions for the server.

Domain failures travel as ``Err`` values (see ``demo_api.result``); the
exceptions here only mark places where such a value escaped unhandled.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from demo_api.result import Failure


class UnhandledFailureError(Exception):
    """Raised when a failure value is unwrapped instead of being translated.

    This happens when a request pipeline has no error-translating middleware,
    or when code calls ``unwrap()`` on an ``Err``.
    """

    def __init__(self, failure: "Failure"):
        self.failure = failure
        super().__init__(f"Unhandled failure: {failure.message}")
