"""API dependencies for FastAPI endpoints."""

from typing import TypeVar

from fastapi import Request

from demo_api.services.registry import ServiceRegistry

T = TypeVar("T")


def get_registry(request: Request) -> ServiceRegistry:
    """Return the service registry of the application serving ``request``."""
    return request.app.state.registry


def resolve_service[T](request: Request, service_type: type[T]) -> T:
    """Resolve a service by type for the current request.

    Args:
        request: The incoming request
        service_type: The type of service to retrieve from the registry

    Returns:
        The registered service instance

    Example:
        ```python
        async def endpoint(request: Request) -> Result[Response, Failure]:
            my_service = resolve_service(request, MyService)
            ...
        ```
    """
    return get_registry(request).get(service_type)
