"""Tests for the service registry."""

import pytest

from demo_api.services.registry import ServiceRegistry


class MockService:
    """A mock service class for testing."""

    def __init__(self, value: str = "default"):
        """Initialize with a value."""
        self.value = value

    def get_value(self) -> str:
        """Get the service value."""
        return self.value


class AnotherMockService:
    """Another mock service class for testing."""

    def __init__(self, number: int = 42):
        """Initialize with a number."""
        self.number = number


def test_register_and_get_singleton():
    """Test registering and retrieving a singleton service."""
    registry = ServiceRegistry()
    service = MockService("singleton")
    registry.register_singleton(MockService, service)
    retrieved_service = registry.get(MockService)
    assert retrieved_service is service
    assert registry.get(MockService) is service
    assert retrieved_service.get_value() == "singleton"


def test_register_and_get_factory():
    """Test registering and retrieving a factory service."""
    registry = ServiceRegistry()
    factory_called = False

    def factory() -> MockService:
        nonlocal factory_called
        factory_called = True
        return MockService("factory")

    registry.register_factory(MockService, factory)
    retrieved_service = registry.get(MockService)
    assert factory_called
    assert retrieved_service.get_value() == "factory"

    another_service = registry.get(MockService)
    assert another_service is not retrieved_service  # New instance each time


def test_get_unregistered_service():
    """Test getting an unregistered service raises KeyError."""
    registry = ServiceRegistry()
    assert not registry.is_registered(MockService)
    with pytest.raises(KeyError, match="Service MockService not registered"):
        registry.get(MockService)


def test_multiple_services():
    """Test registering and retrieving multiple services."""
    registry = ServiceRegistry()
    service1 = MockService("first")

    registry.register_singleton(MockService, service1)
    registry.register_factory(AnotherMockService, lambda: AnotherMockService(100))

    assert registry.is_registered(MockService)
    assert registry.is_registered(AnotherMockService)
    assert registry.get(MockService) is service1
    assert registry.get(AnotherMockService).number == 100


def test_registrations_are_per_registry():
    """Separate registries do not share registrations."""
    first = ServiceRegistry()
    second = ServiceRegistry()
    first.register_singleton(MockService, MockService("only-first"))

    assert first.is_registered(MockService)
    assert not second.is_registered(MockService)
