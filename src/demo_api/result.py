"""Explicit success/failure values returned across the request path.

Services and request handlers return a ``Result`` instead of raising, so a
failure is an ordinary value that callers pass up unchanged until the
error-translation middleware matches on it::

    match ping_service.ping():
        case Ok(reply):
            ...
        case Err(failure):
            ...
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeAlias, TypeVar

from pydantic import BaseModel

from demo_api.exceptions import UnhandledFailureError

T = TypeVar("T")
E = TypeVar("E")


class Failure(BaseModel):
    """An operation failure described by its message."""

    model_config = {"frozen": True}

    message: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Failure":
        """Build a failure carrying the exception's message."""
        return cls(message=str(exc))


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result holding a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result holding an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise ``UnhandledFailureError`` for the held error.

        Raises:
            UnhandledFailureError: Always
        """
        failure = self.error if isinstance(self.error, Failure) else Failure(message=str(self.error))
        raise UnhandledFailureError(failure)


Result: TypeAlias = Ok[T] | Err[E]


__all__ = ["Err", "Failure", "Ok", "Result"]
