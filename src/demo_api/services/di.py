"""Dependency injection setup module.

This module provides centralized service registration for the
FastAPI application.
"""

from loguru import logger

from demo_api.constants import ServiceScope
from demo_api.services.ping_service import PingService, new_ping_service
from demo_api.services.registry import ServiceRegistry
from demo_api.settings import Settings


def register_app_services(registry: ServiceRegistry, settings: Settings) -> None:
    """Register application-specific services in the service registry.

    The ping service is registered according to ``settings.ping_service_scope``:
    as one shared instance, or as a factory building a new instance for every
    resolution. Only the shared instance carries a configured failure from a
    test into the requests that follow.

    Args:
        registry: Service registry instance to register services in
        settings: Settings selecting the service lifetimes
    """
    scope = ServiceScope(settings.ping_service_scope)
    logger.debug(f"Registering application services in DI container (ping service scope: {scope.value})")

    if scope is ServiceScope.SINGLETON:
        registry.register_singleton(PingService, PingService())
    else:
        registry.register_factory(PingService, new_ping_service)


def register_all_services(registry: ServiceRegistry, settings: Settings) -> None:
    """Register all services in the service registry.

    Args:
        registry: Service registry instance to register services in
        settings: Application settings
    """
    register_app_services(registry, settings)
