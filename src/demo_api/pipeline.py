"""Composable request pipeline.

An endpoint turns a request into a ``Result`` holding the response or a
failure. A middleware takes the rest of the pipeline and returns a new
endpoint wrapping it. ``Pipeline`` folds its middlewares around an endpoint
once, when the route is registered, so every request runs the same chain.
"""

from collections.abc import Awaitable, Callable, Sequence

from fastapi import Request, Response
from loguru import logger

from demo_api.result import Failure, Result

Endpoint = Callable[[Request], Awaitable[Result[Response, Failure]]]
Middleware = Callable[[Endpoint], Endpoint]
Route = Callable[[Request], Awaitable[Response]]


class Pipeline:
    """Ordered middleware chain applied to request endpoints.

    The first middleware is the outermost: it sees the request first and the
    result last.
    """

    def __init__(self, middlewares: Sequence[Middleware] = ()):
        self._middlewares: list[Middleware] = list(middlewares)

    @property
    def middlewares(self) -> tuple[Middleware, ...]:
        return tuple(self._middlewares)

    def use(self, middleware: Middleware) -> "Pipeline":
        """Append a middleware innermost of those already registered.

        Returns:
            The pipeline itself, for chaining
        """
        self._middlewares.append(middleware)
        return self

    def compose(self, endpoint: Endpoint) -> Endpoint:
        """Wrap ``endpoint`` in every middleware, outermost first."""
        handler = endpoint
        for middleware in reversed(self._middlewares):
            handler = middleware(handler)
        return handler

    def wrap(self, endpoint: Endpoint) -> Route:
        """Build a framework route callable from an endpoint.

        Args:
            endpoint: The innermost request handler

        Returns:
            An async callable returning the response the chain produced

        Raises:
            UnhandledFailureError: From the returned callable, when a failure
                reaches it untranslated
        """
        handler = self.compose(endpoint)
        logger.debug(f"Composed pipeline of {len(self._middlewares)} middleware(s) around {endpoint.__name__}")

        async def route(request: Request) -> Response:
            result = await handler(request)
            return result.unwrap()

        route.__name__ = endpoint.__name__
        return route
